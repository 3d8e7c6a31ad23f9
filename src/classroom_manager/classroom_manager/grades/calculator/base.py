from __future__ import annotations

from abc import ABC, abstractmethod

from ...grades.model import GradeRecord


class GradeCalculator(ABC):
    """Calculator interface (Strategy Pattern for grade totals)."""

    @abstractmethod
    def total(self, record: GradeRecord) -> float:
        raise NotImplementedError
