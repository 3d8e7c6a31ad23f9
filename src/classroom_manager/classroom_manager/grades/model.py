from __future__ import annotations

from dataclasses import dataclass, field, replace

from ..core.enums import GradeField


@dataclass(frozen=True)
class GradeRecord:
    """Grade components of one student in one class, each in [0, 100]."""

    class_id: int
    student_pk: int
    midterm: float = 0.0
    final: float = 0.0
    activity: float = 0.0

    def with_component(self, component: GradeField, value: float) -> "GradeRecord":
        return replace(self, **{component.value: value})


@dataclass(frozen=True)
class GradeSheet:
    """Grades being edited for a class, keyed by student pk."""

    class_id: int
    rows: dict[int, GradeRecord] = field(default_factory=dict)

    def with_record(self, record: GradeRecord) -> "GradeSheet":
        updated = dict(self.rows)
        updated[record.student_pk] = record
        return GradeSheet(class_id=self.class_id, rows=updated)
