from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..common.numbers import round_half_up
from ..core.constants import GRADE_BANDS
from ..core.enums import LetterGrade
from ..grades.calculator.base import GradeCalculator
from ..grades.calculator.standard_calculator import UnweightedSumCalculator
from ..grades.model import GradeRecord


def letter_grade(total: float) -> LetterGrade:
    """A >= 90 (anything above 100 included), B [80,90), C [70,80), D [60,70), F below."""

    for letter, lower in GRADE_BANDS:
        if total >= lower:
            return LetterGrade(letter)
    return LetterGrade.F


@dataclass(frozen=True)
class GradeSummary:
    distribution: dict[LetterGrade, int]
    average: int

    def distribution_labels(self) -> dict[str, int]:
        return {g.value: n for g, n in self.distribution.items()}


def distribution_of(totals: Iterable[float]) -> dict[LetterGrade, int]:
    dist = {g: 0 for g in LetterGrade}
    for t in totals:
        dist[letter_grade(t)] += 1
    return dist


def summarize_grades(grades: Iterable[GradeRecord], calculator: Optional[GradeCalculator] = None) -> GradeSummary:
    calc = calculator or UnweightedSumCalculator()
    totals = [calc.total(g) for g in grades]
    average = round_half_up(sum(totals) / len(totals)) if totals else 0
    return GradeSummary(distribution=distribution_of(totals), average=average)
