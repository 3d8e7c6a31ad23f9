from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .classes.mysql_class_repository import MySQLClassRepository
from .classes.repository import ClassRepository
from .classes.service import ClassService
from .database.connection import DBConfig, DatabaseConnection
from .grades.calculator.standard_calculator import UnweightedSumCalculator
from .grades.mysql_grade_repository import MySQLGradeRepository
from .grades.repository import GradeRepository
from .grades.service import GradeService
from .reports.service import ReportService
from .sessions.mysql_session_repository import MySQLSessionRepository
from .sessions.repository import SessionRepository
from .sessions.service import SessionService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    classes_repo: ClassRepository
    students_repo: StudentRepository
    sessions_repo: SessionRepository
    attendance_repo: AttendanceRepository
    grades_repo: GradeRepository

    class_service: ClassService
    student_service: StudentService
    session_service: SessionService
    attendance_service: AttendanceService
    grade_service: GradeService
    report_service: ReportService


def wire_container(
    *,
    classes_repo: ClassRepository,
    students_repo: StudentRepository,
    sessions_repo: SessionRepository,
    attendance_repo: AttendanceRepository,
    grades_repo: GradeRepository,
) -> Container:
    """Build services on top of any set of repositories (MySQL or in-memory)."""

    calculator = UnweightedSumCalculator()
    return Container(
        classes_repo=classes_repo,
        students_repo=students_repo,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        grades_repo=grades_repo,
        class_service=ClassService(classes_repo, students_repo, sessions_repo),
        student_service=StudentService(students_repo, classes_repo),
        session_service=SessionService(sessions_repo, students_repo),
        attendance_service=AttendanceService(attendance_repo, sessions_repo, students_repo),
        grade_service=GradeService(grades_repo, students_repo, calculator=calculator),
        report_service=ReportService(students_repo, sessions_repo, attendance_repo, grades_repo, calculator=calculator),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_settings(db_config))

    return wire_container(
        classes_repo=MySQLClassRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        sessions_repo=MySQLSessionRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        grades_repo=MySQLGradeRepository(conn),
    )
