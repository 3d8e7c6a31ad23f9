from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from ..classes.repository import ClassRepository
from ..core.exceptions import NotFoundError, RosterImportError, ValidationError
from .model import ImportFailure, ImportOutcome, ImportPreview, Student
from .parser import RawRow, parse_spreadsheet
from .reconciler import RosterReconciler
from .repository import StudentRepository

logger = logging.getLogger(__name__)

SpreadsheetParser = Callable[[str, bytes], Sequence[RawRow]]


class StudentService:
    """Use case: roster listing, import (preview -> confirm) and removal."""

    def __init__(
        self,
        students: StudentRepository,
        classes: ClassRepository,
        *,
        reconciler: Optional[RosterReconciler] = None,
        parser: SpreadsheetParser = parse_spreadsheet,
    ):
        self._students = students
        self._classes = classes
        self._reconciler = reconciler or RosterReconciler()
        self._parse = parser

    def _require_class(self, class_id: int) -> None:
        if not self._classes.get_by_id(int(class_id)):
            raise NotFoundError("Class not found")

    def list_students(self, class_id: int, *, search: Optional[str] = None) -> list[Student]:
        students = list(self._students.list_for_class(int(class_id)))
        needle = (search or "").strip().lower()
        if not needle:
            return students
        return [s for s in students if needle in s.search_text()]

    def preview_import(self, *, class_id: int, filename: str, payload: bytes) -> ImportOutcome:
        """Parse and reconcile an upload without touching the roster.

        Format, parse and empty-result failures come back as ImportFailure
        rather than being raised.
        """

        self._require_class(class_id)
        try:
            raw_rows = self._parse(filename, payload)
            rows = self._reconciler.reconcile(raw_rows)
        except RosterImportError as e:
            logger.info("import preview rejected for class %s (%s): %s", class_id, e.reason, e)
            return ImportFailure(reason=e.reason, message=str(e))

        logger.info("staged %d of %d rows from %s for class %s", len(rows), len(raw_rows), filename, class_id)
        return ImportPreview(class_id=int(class_id), rows=rows)

    def stage_rows(self, *, class_id: int, rows: Iterable[Mapping[str, Any]]) -> ImportPreview:
        """Rebuild a preview from rows sent back by the client for confirmation."""

        self._require_class(class_id)
        return ImportPreview(class_id=int(class_id), rows=self._reconciler.reconcile(rows))

    def confirm_import(self, preview: ImportPreview) -> int:
        if not preview.rows:
            raise ValidationError("Nothing to import")

        written = self._students.upsert_many(class_id=preview.class_id, rows=preview.rows)
        logger.info("imported %d students into class %s", written, preview.class_id)
        return written

    def remove_student(self, student_pk: int) -> None:
        if not self._students.delete(int(student_pk)):
            raise NotFoundError("Student not found")
        logger.info("removed student %s", student_pk)

    def get_student(self, student_pk: int) -> Student:
        s = self._students.get_by_id(int(student_pk))
        if not s:
            raise NotFoundError("Student not found")
        return s
