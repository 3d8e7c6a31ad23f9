from __future__ import annotations

from datetime import date


def today_local() -> date:
    """Current local date; sessions are stamped with it."""
    return date.today()
