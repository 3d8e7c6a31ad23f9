from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import PreviewRow, Student
from .repository import StudentRepository


def _to_student(r: dict) -> Student:
    return Student(
        id=int(r["id"]),
        class_id=int(r["class_id"]),
        student_id=str(r["student_id"]),
        first_name=r["first_name"],
        last_name=r["last_name"],
        email=r.get("email"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_class(self, class_id: int) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, class_id, student_id, first_name, last_name, email
                FROM students
                WHERE class_id=%s
                ORDER BY student_id ASC
                """,
                (int(class_id),),
            )
            return [_to_student(r) for r in fetchall(cur)]

    def get_by_id(self, student_pk: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, class_id, student_id, first_name, last_name, email
                FROM students
                WHERE id=%s
                """,
                (int(student_pk),),
            )
            r = fetchone(cur)
            return _to_student(r) if r else None

    def count_for_class(self, class_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM students WHERE class_id=%s", (int(class_id),))
            r = fetchone(cur)
            return int(r["n"]) if r else 0

    def upsert_many(self, *, class_id: int, rows: Sequence[PreviewRow]) -> int:
        if not rows:
            return 0

        params = [(int(class_id), r.student_id, r.first_name, r.last_name, r.email) for r in rows]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO students(class_id, student_id, first_name, last_name, email)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    first_name=VALUES(first_name),
                    last_name=VALUES(last_name),
                    email=VALUES(email)
                """,
                params,
            )
        return len(params)

    def delete(self, student_pk: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM students WHERE id=%s", (int(student_pk),))
            return cur.rowcount > 0
