from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Student:
    """Roster entry. `id` is the store key, `student_id` the roster code."""

    id: int
    class_id: int
    student_id: str
    first_name: str
    last_name: str
    email: Optional[str] = None

    def search_text(self) -> str:
        return f"{self.student_id} {self.first_name} {self.last_name} {self.email or ''}".lower()


@dataclass(frozen=True)
class PreviewRow:
    """A reconciled, not-yet-committed import candidate."""

    student_id: str
    first_name: str
    last_name: str
    email: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
        }


@dataclass(frozen=True)
class ImportPreview:
    """Staged import waiting for the confirm step."""

    class_id: int
    rows: tuple[PreviewRow, ...]

    def __len__(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class ImportFailure:
    """Why an upload produced nothing to preview."""

    reason: str
    message: str


ImportOutcome = Union[ImportPreview, ImportFailure]
