"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the class report is built by ReportService.
"""

import importlib
import sys

from config import get_settings_module

from src.classroom_manager.classroom_manager.container import build_container


def main(class_id: int) -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    report = container.report_service.build_class_report(class_id)
    print(f"students={report.total_students} attendance={report.attendance.attendance_rate}% avg={report.grades.average}")
    print(report.grades.distribution_labels())


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 1)
