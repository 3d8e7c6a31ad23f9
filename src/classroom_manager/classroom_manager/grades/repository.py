from __future__ import annotations

from typing import Protocol, Sequence

from .model import GradeRecord


class GradeRepository(Protocol):
    def list_for_class(self, class_id: int) -> Sequence[GradeRecord]:
        raise NotImplementedError

    def upsert_many(self, *, class_id: int, records: Sequence[GradeRecord]) -> int:
        """Insert or overwrite all three components by (class_id, student_pk)."""

        raise NotImplementedError
