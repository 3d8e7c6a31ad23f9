from __future__ import annotations

from .base import GradeCalculator
from ...grades.model import GradeRecord


class UnweightedSumCalculator(GradeCalculator):
    """Standard rule: midterm + final + activity, no weighting."""

    def total(self, record: GradeRecord) -> float:
        return float(record.midterm or 0) + float(record.final or 0) + float(record.activity or 0)
