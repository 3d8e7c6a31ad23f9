from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from ..attendance.model import AttendanceRecord
from ..common.numbers import percentage
from ..core.enums import AttendanceStatus
from ..sessions.model import Session


@dataclass(frozen=True)
class SessionCounts:
    session_id: int
    date: str
    present: int
    absent: int
    late: int

    @property
    def total(self) -> int:
        return self.present + self.absent + self.late


@dataclass(frozen=True)
class AttendanceSummary:
    sessions: list[SessionCounts]
    attendance_rate: int


def count_session(session: Session, records: Sequence[AttendanceRecord]) -> SessionCounts:
    # only stored records count here; students without a record are not
    # treated as absent
    statuses = [r.status for r in records]
    return SessionCounts(
        session_id=session.session_id,
        date=session.date.isoformat(),
        present=statuses.count(AttendanceStatus.PRESENT),
        absent=statuses.count(AttendanceStatus.ABSENT),
        late=statuses.count(AttendanceStatus.LATE),
    )


def summarize_attendance(
    sessions: Sequence[Session],
    records_by_session: Mapping[int, Sequence[AttendanceRecord]],
) -> AttendanceSummary:
    """Per-session counts plus the overall rate.

    rate = (present + late) / all stored records, as a rounded percentage;
    0 when nothing has been recorded.
    """

    counts = [count_session(s, records_by_session.get(s.session_id, ())) for s in sessions]
    attended = sum(c.present + c.late for c in counts)
    recorded = sum(c.total for c in counts)
    return AttendanceSummary(sessions=counts, attendance_rate=percentage(attended, recorded))
