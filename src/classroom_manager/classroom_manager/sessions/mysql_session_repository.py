from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Session
from .repository import SessionRepository


def _to_session(r: dict) -> Session:
    return Session(session_id=int(r["session_id"]), class_id=int(r["class_id"]), date=r["date"])


class MySQLSessionRepository(SessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, session_id: int) -> Optional[Session]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT session_id, class_id, date FROM sessions WHERE session_id=%s", (int(session_id),))
            r = fetchone(cur)
            return _to_session(r) if r else None

    def list_for_class(self, class_id: int, *, newest_first: bool = False) -> Sequence[Session]:
        order = "DESC" if newest_first else "ASC"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT session_id, class_id, date
                FROM sessions
                WHERE class_id=%s
                ORDER BY date {order}, session_id {order}
                """,
                (int(class_id),),
            )
            return [_to_session(r) for r in fetchall(cur)]

    def count_for_class(self, class_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM sessions WHERE class_id=%s", (int(class_id),))
            r = fetchone(cur)
            return int(r["n"]) if r else 0

    def create(self, *, class_id: int, session_date: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO sessions(class_id, date) VALUES(%s,%s)", (int(class_id), session_date))
            return int(cur.lastrowid)
