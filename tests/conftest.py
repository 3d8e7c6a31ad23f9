from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.classroom_manager.classroom_manager.attendance.model import AttendanceRecord
from src.classroom_manager.classroom_manager.classes.model import ClassRoom
from src.classroom_manager.classroom_manager.container import wire_container
from src.classroom_manager.classroom_manager.core.enums import AttendanceStatus
from src.classroom_manager.classroom_manager.grades.model import GradeRecord
from src.classroom_manager.classroom_manager.sessions.model import Session
from src.classroom_manager.classroom_manager.students.model import Student


class InMemoryClasses:
    def __init__(self):
        self._by_id: dict[int, ClassRoom] = {}
        self._id = 0

    def get_by_id(self, class_id: int) -> Optional[ClassRoom]:
        return self._by_id.get(int(class_id))

    def list_for_professor(self, professor_id: str):
        items = [c for c in self._by_id.values() if c.professor_id == str(professor_id)]
        return sorted(items, key=lambda c: c.class_id, reverse=True)

    def create(self, *, name: str, code: str, term: str, professor_id: str) -> int:
        self._id += 1
        self._by_id[self._id] = ClassRoom(
            class_id=self._id,
            name=name,
            code=code,
            term=term,
            professor_id=str(professor_id),
            created_at=datetime(2026, 1, 1, 9, 0),
        )
        return self._id


class InMemoryStudents:
    def __init__(self):
        self._by_id: dict[int, Student] = {}
        self._id = 0

    def list_for_class(self, class_id: int):
        items = [s for s in self._by_id.values() if s.class_id == int(class_id)]
        return sorted(items, key=lambda s: s.student_id)

    def get_by_id(self, student_pk: int) -> Optional[Student]:
        return self._by_id.get(int(student_pk))

    def count_for_class(self, class_id: int) -> int:
        return len(self.list_for_class(class_id))

    def upsert_many(self, *, class_id: int, rows) -> int:
        for r in rows:
            existing = next(
                (s for s in self._by_id.values() if s.class_id == int(class_id) and s.student_id == r.student_id),
                None,
            )
            if existing:
                self._by_id[existing.id] = replace(
                    existing, first_name=r.first_name, last_name=r.last_name, email=r.email
                )
                continue
            self._id += 1
            self._by_id[self._id] = Student(
                id=self._id,
                class_id=int(class_id),
                student_id=r.student_id,
                first_name=r.first_name,
                last_name=r.last_name,
                email=r.email,
            )
        return len(rows)

    def delete(self, student_pk: int) -> bool:
        return self._by_id.pop(int(student_pk), None) is not None


class InMemorySessions:
    def __init__(self):
        self._by_id: dict[int, Session] = {}
        self._id = 0

    def get_by_id(self, session_id: int) -> Optional[Session]:
        return self._by_id.get(int(session_id))

    def list_for_class(self, class_id: int, *, newest_first: bool = False):
        items = [s for s in self._by_id.values() if s.class_id == int(class_id)]
        return sorted(items, key=lambda s: (s.date, s.session_id), reverse=newest_first)

    def count_for_class(self, class_id: int) -> int:
        return len(self.list_for_class(class_id))

    def create(self, *, class_id: int, session_date: date) -> int:
        self._id += 1
        self._by_id[self._id] = Session(session_id=self._id, class_id=int(class_id), date=session_date)
        return self._id


class InMemoryAttendance:
    def __init__(self):
        self._by_key: dict[tuple[int, int], AttendanceStatus] = {}
        self.status_lookups = 0

    def list_for_session(self, session_id: int):
        return [
            AttendanceRecord(session_id=sid, student_pk=pk, status=status)
            for (sid, pk), status in self._by_key.items()
            if sid == int(session_id)
        ]

    def get_status(self, *, session_id: int, student_pk: int):
        self.status_lookups += 1
        return self._by_key.get((int(session_id), int(student_pk)))

    def replace_for_session(self, *, session_id: int, records) -> int:
        for key in [k for k in self._by_key if k[0] == int(session_id)]:
            del self._by_key[key]
        for r in records:
            self._by_key[(int(session_id), int(r.student_pk))] = r.status
        return len(records)

    def put(self, session_id: int, student_pk: int, status: AttendanceStatus) -> None:
        self._by_key[(session_id, student_pk)] = status


class InMemoryGrades:
    def __init__(self):
        self._by_key: dict[tuple[int, int], GradeRecord] = {}

    def list_for_class(self, class_id: int):
        return [g for (cid, _), g in self._by_key.items() if cid == int(class_id)]

    def upsert_many(self, *, class_id: int, records) -> int:
        for g in records:
            self._by_key[(int(class_id), int(g.student_pk))] = g
        return len(records)


class Store:
    """All in-memory repositories of one test."""

    def __init__(self):
        self.classes = InMemoryClasses()
        self.students = InMemoryStudents()
        self.sessions = InMemorySessions()
        self.attendance = InMemoryAttendance()
        self.grades = InMemoryGrades()

    def container(self):
        return wire_container(
            classes_repo=self.classes,
            students_repo=self.students,
            sessions_repo=self.sessions,
            attendance_repo=self.attendance,
            grades_repo=self.grades,
        )


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def container(store):
    return store.container()


@pytest.fixture
def class_id(store) -> int:
    return store.classes.create(name="Algorithms", code="CS201", term="Fall", professor_id="prof-1")


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 3, 2)
