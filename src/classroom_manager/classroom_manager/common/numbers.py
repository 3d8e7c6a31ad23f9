from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (81.5 -> 82)."""
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int:
    if not whole:
        return 0
    return round_half_up(part / whole * 100)
