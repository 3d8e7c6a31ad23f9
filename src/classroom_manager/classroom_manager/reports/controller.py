from __future__ import annotations

import io

from flask import Flask, jsonify, send_file

from ..common.http import api_errors, current_professor_id, login_required, to_jsonable
from ..container import Container
from ..core.constants import EXPORT_FILENAME, XLSX_MIMETYPE
from .exporter import export_to_excel_bytes


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/<int:class_id>/report", methods=["GET"], endpoint="report_stats")
    @login_required
    @api_errors
    def report_stats(class_id: int):
        container.class_service.get_class(class_id, professor_id=current_professor_id())
        report = container.report_service.build_class_report(class_id)
        return jsonify(
            {
                "success": True,
                "total_students": report.total_students,
                "attendance_rate": report.attendance.attendance_rate,
                "sessions": to_jsonable(report.attendance.sessions),
                "average_grade": report.grades.average,
                "grade_distribution": report.grades.distribution_labels(),
            }
        )

    @app.route("/api/classes/<int:class_id>/report.xlsx", methods=["GET"], endpoint="report_export")
    @login_required
    @api_errors
    def report_export(class_id: int):
        container.class_service.get_class(class_id, professor_id=current_professor_id())
        rows = container.report_service.build_export_rows(class_id)
        data = export_to_excel_bytes(rows)
        return send_file(
            io.BytesIO(data),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=EXPORT_FILENAME,
        )
