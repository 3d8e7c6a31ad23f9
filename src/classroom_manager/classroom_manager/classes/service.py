from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from ..sessions.repository import SessionRepository
from ..students.repository import StudentRepository
from .model import ClassRoom, ClassSummary
from .repository import ClassRepository

logger = logging.getLogger(__name__)


class ClassService:
    """Use case: create classes and list them on the dashboard."""

    def __init__(self, classes: ClassRepository, students: StudentRepository, sessions: SessionRepository):
        self._classes = classes
        self._students = students
        self._sessions = sessions

    def create_class(self, *, professor_id: str, name: str, code: Optional[str] = None, term: Optional[str] = None) -> int:
        name = require_non_empty(name, "Class name")
        class_id = self._classes.create(
            name=name,
            code=(code or "").strip(),
            term=(term or "").strip(),
            professor_id=str(professor_id),
        )
        logger.info("created class %s (%s) for professor %s", class_id, name, professor_id)
        return class_id

    def get_class(self, class_id: int, *, professor_id: Optional[str] = None) -> ClassRoom:
        """Fetch a class; with professor_id, classes owned by someone else look missing."""

        c = self._classes.get_by_id(int(class_id))
        if not c or (professor_id is not None and c.professor_id != str(professor_id)):
            raise NotFoundError("Class not found")
        return c

    def list_dashboard(self, professor_id: str) -> list[ClassSummary]:
        out: list[ClassSummary] = []
        for c in self._classes.list_for_professor(str(professor_id)):
            out.append(
                ClassSummary(
                    class_id=c.class_id,
                    name=c.name,
                    code=c.code,
                    term=c.term,
                    student_count=self._students.count_for_class(c.class_id),
                    session_count=self._sessions.count_for_class(c.class_id),
                )
            )
        return out
