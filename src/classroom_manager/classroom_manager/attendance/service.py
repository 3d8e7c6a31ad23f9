from __future__ import annotations

import logging
from typing import Any

from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..sessions.repository import SessionRepository
from ..students.repository import StudentRepository
from .model import AttendanceSheet
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def parse_status(value: Any) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value!r}") from None


class AttendanceService:
    """Use case: mark attendance for a session.

    Opening a sheet treats every roster student without a stored record as
    absent. Saving writes the whole sheet, so defaulted students get a real
    "absent" record from then on.
    """

    def __init__(self, attendance: AttendanceRepository, sessions: SessionRepository, students: StudentRepository):
        self._attendance = attendance
        self._sessions = sessions
        self._students = students

    def open_sheet(self, session_id: int) -> AttendanceSheet:
        session = self._sessions.get_by_id(int(session_id))
        if not session:
            raise NotFoundError("Session not found")

        statuses = {s.id: AttendanceStatus.ABSENT for s in self._students.list_for_class(session.class_id)}
        for record in self._attendance.list_for_session(session.session_id):
            statuses[record.student_pk] = record.status
        return AttendanceSheet(session_id=session.session_id, statuses=statuses)

    def mark(self, sheet: AttendanceSheet, student_pk: int, status: Any) -> AttendanceSheet:
        if int(student_pk) not in sheet.statuses:
            raise ValidationError(f"Student {student_pk} is not on this session's roster")
        return sheet.with_status(int(student_pk), parse_status(status))

    def save_sheet(self, sheet: AttendanceSheet) -> int:
        written = self._attendance.replace_for_session(session_id=sheet.session_id, records=sheet.to_records())
        logger.info("saved %d attendance records for session %s", written, sheet.session_id)
        return written
