from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.validators import clamp_score
from ..core.enums import GradeField
from ..core.exceptions import ValidationError
from ..students.repository import StudentRepository
from .calculator.base import GradeCalculator
from .calculator.standard_calculator import UnweightedSumCalculator
from .model import GradeRecord, GradeSheet
from .repository import GradeRepository

logger = logging.getLogger(__name__)


def parse_field(value: Any) -> GradeField:
    if isinstance(value, GradeField):
        return value
    try:
        return GradeField(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown grade field: {value!r}") from None


class GradeService:
    def __init__(
        self,
        grades: GradeRepository,
        students: StudentRepository,
        *,
        calculator: Optional[GradeCalculator] = None,
    ):
        self._grades = grades
        self._students = students
        self._calculator = calculator or UnweightedSumCalculator()

    def open_sheet(self, class_id: int) -> GradeSheet:
        """One row per roster student; students without grades start at zero."""

        stored = {g.student_pk: g for g in self._grades.list_for_class(int(class_id))}
        rows: dict[int, GradeRecord] = {}
        for s in self._students.list_for_class(int(class_id)):
            rows[s.id] = stored.get(s.id) or GradeRecord(class_id=int(class_id), student_pk=s.id)
        return GradeSheet(class_id=int(class_id), rows=rows)

    def update(self, sheet: GradeSheet, student_pk: int, field: Any, value: Any) -> GradeSheet:
        record = sheet.rows.get(int(student_pk))
        if record is None:
            raise ValidationError(f"Student {student_pk} is not on this class roster")
        return sheet.with_record(record.with_component(parse_field(field), clamp_score(value)))

    def total(self, record: GradeRecord) -> float:
        return self._calculator.total(record)

    def save_sheet(self, sheet: GradeSheet) -> int:
        # clamp again: sheets may be built outside update()
        records = [
            GradeRecord(
                class_id=sheet.class_id,
                student_pk=r.student_pk,
                midterm=clamp_score(r.midterm),
                final=clamp_score(r.final),
                activity=clamp_score(r.activity),
            )
            for r in sheet.rows.values()
        ]
        written = self._grades.upsert_many(class_id=sheet.class_id, records=records)
        logger.info("saved grades for %d students in class %s", written, sheet.class_id)
        return written
