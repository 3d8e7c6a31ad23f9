from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ClassRoom:
    """Top-level scope owning students, sessions and grades."""

    class_id: int
    name: str
    code: str
    term: str
    professor_id: str
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class ClassSummary:
    """Read-model for the dashboard list."""

    class_id: int
    name: str
    code: str
    term: str
    student_count: int
    session_count: int
