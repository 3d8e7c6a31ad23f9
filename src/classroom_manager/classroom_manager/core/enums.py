from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status stored per (session, student)."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class GradeField(str, Enum):
    """Editable grade components."""

    MIDTERM = "midterm"
    FINAL = "final"
    ACTIVITY = "activity"


class LetterGrade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"
