from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ClassRoom


class ClassRepository(Protocol):
    def get_by_id(self, class_id: int) -> Optional[ClassRoom]:
        raise NotImplementedError

    def list_for_professor(self, professor_id: str) -> Sequence[ClassRoom]:
        """Newest first."""

        raise NotImplementedError

    def create(self, *, name: str, code: str, term: str, professor_id: str) -> int:
        raise NotImplementedError
