from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, current_professor_id, json_error, login_required
from ..container import Container
from ..core.enums import GradeField
from .model import GradeSheet


def register(app: Flask, container: Container) -> None:
    def _sheet_json(sheet: GradeSheet) -> list[dict]:
        return [
            {
                "student_pk": r.student_pk,
                "midterm": r.midterm,
                "final": r.final,
                "activity": r.activity,
                "total": container.grade_service.total(r),
            }
            for r in sheet.rows.values()
        ]

    @app.route("/api/classes/<int:class_id>/grades", methods=["GET"], endpoint="grades_sheet")
    @login_required
    @api_errors
    def grades_sheet(class_id: int):
        container.class_service.get_class(class_id, professor_id=current_professor_id())
        sheet = container.grade_service.open_sheet(class_id)
        return jsonify({"success": True, "grades": _sheet_json(sheet)})

    @app.route("/api/classes/<int:class_id>/grades", methods=["PUT"], endpoint="grades_save")
    @login_required
    @api_errors
    def grades_save(class_id: int):
        """Body: {"grades": [{"student_pk": 1, "midterm": 80, "final": 70, "activity": 10}]}."""

        container.class_service.get_class(class_id, professor_id=current_professor_id())
        data = request.get_json(silent=True) or {}
        entries = data.get("grades")
        if not isinstance(entries, list):
            return json_error("grades must be a list", 400)

        svc = container.grade_service
        sheet = svc.open_sheet(class_id)
        for entry in entries:
            if not isinstance(entry, dict) or "student_pk" not in entry:
                return json_error("each grade needs a student_pk", 400)
            try:
                student_pk = int(entry["student_pk"])
            except (TypeError, ValueError):
                return json_error(f"Invalid student id: {entry['student_pk']!r}", 400)
            for field in GradeField:
                if field.value in entry:
                    sheet = svc.update(sheet, student_pk, field, entry[field.value])

        saved = svc.save_sheet(sheet)
        return jsonify({"success": True, "saved": saved, "grades": _sheet_json(sheet)})
