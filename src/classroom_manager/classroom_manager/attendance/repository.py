from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_session(self, session_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_status(self, *, session_id: int, student_pk: int) -> Optional[AttendanceStatus]:
        """Stored status of one (session, student) pair, None when absent from the store."""

        raise NotImplementedError

    def replace_for_session(self, *, session_id: int, records: Sequence[AttendanceRecord]) -> int:
        """Swap all records of a session in a single transaction."""

        raise NotImplementedError
