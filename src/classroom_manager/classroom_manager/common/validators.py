from __future__ import annotations

import math
from typing import Any

from ..core.constants import SCORE_MAX, SCORE_MIN
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def clamp_score(value: Any) -> float:
    """Coerce a grade input into [SCORE_MIN, SCORE_MAX].

    Non-numeric input (including NaN and blank strings) counts as 0.
    """

    if isinstance(value, bool):
        value = int(value)
    try:
        num = float(value)
    except (TypeError, ValueError):
        num = 0.0
    if math.isnan(num):
        num = 0.0
    return float(max(SCORE_MIN, min(SCORE_MAX, num)))
