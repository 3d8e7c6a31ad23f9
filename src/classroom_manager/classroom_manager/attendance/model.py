from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    session_id: int
    student_pk: int
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceSheet:
    """Attendance being edited for one session, keyed by student pk."""

    session_id: int
    statuses: dict[int, AttendanceStatus] = field(default_factory=dict)

    def with_status(self, student_pk: int, status: AttendanceStatus) -> "AttendanceSheet":
        updated = dict(self.statuses)
        updated[int(student_pk)] = status
        return AttendanceSheet(session_id=self.session_id, statuses=updated)

    def to_records(self) -> list[AttendanceRecord]:
        return [
            AttendanceRecord(session_id=self.session_id, student_pk=pk, status=status)
            for pk, status in self.statuses.items()
        ]
