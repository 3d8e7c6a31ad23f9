from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_float
from .model import GradeRecord
from .repository import GradeRepository


class MySQLGradeRepository(GradeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_class(self, class_id: int) -> Sequence[GradeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, student_pk, midterm, final, activity
                FROM grades
                WHERE class_id=%s
                """,
                (int(class_id),),
            )
            return [
                GradeRecord(
                    class_id=int(r["class_id"]),
                    student_pk=int(r["student_pk"]),
                    midterm=to_float(r.get("midterm")),
                    final=to_float(r.get("final")),
                    activity=to_float(r.get("activity")),
                )
                for r in fetchall(cur)
            ]

    def upsert_many(self, *, class_id: int, records: Sequence[GradeRecord]) -> int:
        if not records:
            return 0

        params = [(int(class_id), int(g.student_pk), g.midterm, g.final, g.activity) for g in records]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO grades(class_id, student_pk, midterm, final, activity)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    midterm=VALUES(midterm),
                    final=VALUES(final),
                    activity=VALUES(activity)
                """,
                params,
            )
        return len(params)
