from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import Session
from .repository import SessionRepository

logger = logging.getLogger(__name__)


class SessionService:
    def __init__(self, sessions: SessionRepository, students: StudentRepository):
        self._sessions = sessions
        self._students = students

    def list_sessions(self, class_id: int) -> list[Session]:
        return list(self._sessions.list_for_class(int(class_id), newest_first=True))

    def create_session(self, class_id: int, *, today: Optional[date] = None) -> int:
        if self._students.count_for_class(int(class_id)) == 0:
            raise ValidationError("Add students before creating a session")

        session_date = today or today_local()
        session_id = self._sessions.create(class_id=int(class_id), session_date=session_date)
        logger.info("created session %s (%s) for class %s", session_id, session_date.isoformat(), class_id)
        return session_id

    def get_session(self, session_id: int) -> Session:
        s = self._sessions.get_by_id(int(session_id))
        if not s:
            raise NotFoundError("Session not found")
        return s
