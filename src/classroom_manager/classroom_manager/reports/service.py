from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..core.enums import AttendanceStatus
from ..grades.calculator.base import GradeCalculator
from ..grades.calculator.standard_calculator import UnweightedSumCalculator
from ..grades.model import GradeRecord
from ..grades.repository import GradeRepository
from ..sessions.repository import SessionRepository
from ..students.repository import StudentRepository
from .attendance_stats import AttendanceSummary, summarize_attendance
from .grade_stats import GradeSummary, summarize_grades


@dataclass(frozen=True)
class ClassReport:
    total_students: int
    attendance: AttendanceSummary
    grades: GradeSummary


def _num(value: float):
    # 85.0 -> 85 so spreadsheets don't show trailing decimals
    return int(value) if float(value).is_integer() else value


class ReportService:
    def __init__(
        self,
        students: StudentRepository,
        sessions: SessionRepository,
        attendance: AttendanceRepository,
        grades: GradeRepository,
        *,
        calculator: Optional[GradeCalculator] = None,
    ):
        self._students = students
        self._sessions = sessions
        self._attendance = attendance
        self._grades = grades
        self._calculator = calculator or UnweightedSumCalculator()

    def build_class_report(self, class_id: int) -> ClassReport:
        class_id = int(class_id)
        sessions = self._sessions.list_for_class(class_id)
        records_by_session = {s.session_id: self._attendance.list_for_session(s.session_id) for s in sessions}

        return ClassReport(
            total_students=self._students.count_for_class(class_id),
            attendance=summarize_attendance(sessions, records_by_session),
            grades=summarize_grades(self._grades.list_for_class(class_id), self._calculator),
        )

    def build_export_rows(self, class_id: int) -> list[dict]:
        """One flat row per student, ordered by roster code.

        Session columns are keyed by date; a (session, student) pair with no
        stored record exports as "absent". Students without grades export
        zeros.
        """

        class_id = int(class_id)
        students = self._students.list_for_class(class_id)
        sessions = self._sessions.list_for_class(class_id)
        grades = {g.student_pk: g for g in self._grades.list_for_class(class_id)}

        rows: list[dict] = []
        for s in students:
            row: dict = {
                "Student ID": s.student_id,
                "First Name": s.first_name,
                "Last Name": s.last_name,
                "Email": s.email or "",
            }
            for sess in sessions:
                status = self._attendance.get_status(session_id=sess.session_id, student_pk=s.id)
                row[sess.date.isoformat()] = (status or AttendanceStatus.ABSENT).value

            grade = grades.get(s.id) or GradeRecord(class_id=class_id, student_pk=s.id)
            row["Midterm"] = _num(grade.midterm)
            row["Final"] = _num(grade.final)
            row["Activity"] = _num(grade.activity)
            row["Total"] = _num(self._calculator.total(grade))
            rows.append(row)

        return rows
