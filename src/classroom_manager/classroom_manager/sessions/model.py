from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Session:
    """One dated attendance-taking occasion of a class."""

    session_id: int
    class_id: int
    date: date
