from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Session


class SessionRepository(Protocol):
    def get_by_id(self, session_id: int) -> Optional[Session]:
        raise NotImplementedError

    def list_for_class(self, class_id: int, *, newest_first: bool = False) -> Sequence[Session]:
        raise NotImplementedError

    def count_for_class(self, class_id: int) -> int:
        raise NotImplementedError

    def create(self, *, class_id: int, session_date: date) -> int:
        raise NotImplementedError
