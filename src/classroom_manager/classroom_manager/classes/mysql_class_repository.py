from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ClassRoom
from .repository import ClassRepository


def _to_class(r: dict) -> ClassRoom:
    return ClassRoom(
        class_id=int(r["class_id"]),
        name=r["name"],
        code=r.get("code") or "",
        term=r.get("term") or "",
        professor_id=str(r["professor_id"]),
        created_at=r.get("created_at"),
    )


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, class_id: int) -> Optional[ClassRoom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, name, code, term, professor_id, created_at
                FROM classes
                WHERE class_id=%s
                """,
                (int(class_id),),
            )
            r = fetchone(cur)
            return _to_class(r) if r else None

    def list_for_professor(self, professor_id: str) -> Sequence[ClassRoom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, name, code, term, professor_id, created_at
                FROM classes
                WHERE professor_id=%s
                ORDER BY created_at DESC, class_id DESC
                """,
                (str(professor_id),),
            )
            return [_to_class(r) for r in fetchall(cur)]

    def create(self, *, name: str, code: str, term: str, professor_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO classes(name, code, term, professor_id)
                VALUES(%s,%s,%s,%s)
                """,
                (name, code, term, str(professor_id)),
            )
            return int(cur.lastrowid)
