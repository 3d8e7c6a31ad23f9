from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_session(self, session_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT session_id, student_pk, status FROM attendance WHERE session_id=%s",
                (int(session_id),),
            )
            return [
                AttendanceRecord(
                    session_id=int(r["session_id"]),
                    student_pk=int(r["student_pk"]),
                    status=AttendanceStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]

    def get_status(self, *, session_id: int, student_pk: int) -> Optional[AttendanceStatus]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT status FROM attendance WHERE session_id=%s AND student_pk=%s",
                (int(session_id), int(student_pk)),
            )
            r = fetchone(cur)
            return AttendanceStatus(r["status"]) if r else None

    def replace_for_session(self, *, session_id: int, records: Sequence[AttendanceRecord]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE session_id=%s", (int(session_id),))
            if records:
                cur.executemany(
                    "INSERT INTO attendance(session_id, student_pk, status) VALUES(%s,%s,%s)",
                    [(int(session_id), int(r.student_pk), r.status.value) for r in records],
                )
        return len(records)
