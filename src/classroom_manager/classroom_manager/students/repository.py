from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import PreviewRow, Student


class StudentRepository(Protocol):
    def list_for_class(self, class_id: int) -> Sequence[Student]:
        """Ordered by student_id."""

        raise NotImplementedError

    def get_by_id(self, student_pk: int) -> Optional[Student]:
        raise NotImplementedError

    def count_for_class(self, class_id: int) -> int:
        raise NotImplementedError

    def upsert_many(self, *, class_id: int, rows: Sequence[PreviewRow]) -> int:
        """Insert or overwrite by (class_id, student_id) in one call.

        Returns the number of rows written.
        """

        raise NotImplementedError

    def delete(self, student_pk: int) -> bool:
        raise NotImplementedError
