from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, current_professor_id, json_error, login_required, to_jsonable
from ..container import Container
from .model import ImportFailure


def register(app: Flask, container: Container) -> None:
    def _own(class_id: int) -> None:
        container.class_service.get_class(class_id, professor_id=current_professor_id())

    @app.route("/api/classes/<int:class_id>/students", methods=["GET"], endpoint="students_list")
    @login_required
    @api_errors
    def students_list(class_id: int):
        _own(class_id)
        students = container.student_service.list_students(class_id, search=request.args.get("q"))
        return jsonify({"success": True, "count": len(students), "students": to_jsonable(students)})

    @app.route("/api/classes/<int:class_id>/students/import", methods=["POST"], endpoint="students_import_preview")
    @login_required
    @api_errors
    def students_import_preview(class_id: int):
        """Upload a roster file; the response is a preview, nothing is saved yet."""

        _own(class_id)
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            return json_error("Missing file", 400)

        outcome = container.student_service.preview_import(
            class_id=class_id,
            filename=upload.filename,
            payload=upload.read(),
        )
        if isinstance(outcome, ImportFailure):
            return json_error(outcome.message, 400, reason=outcome.reason)

        return jsonify(
            {
                "success": True,
                "count": len(outcome),
                "rows": [r.to_dict() for r in outcome.rows],
            }
        )

    @app.route(
        "/api/classes/<int:class_id>/students/import/confirm",
        methods=["POST"],
        endpoint="students_import_confirm",
    )
    @login_required
    @api_errors
    def students_import_confirm(class_id: int):
        _own(class_id)
        data = request.get_json(silent=True) or {}
        rows = data.get("rows")
        if not isinstance(rows, list):
            return json_error("rows must be a list", 400)

        preview = container.student_service.stage_rows(class_id=class_id, rows=[r for r in rows if isinstance(r, dict)])
        imported = container.student_service.confirm_import(preview)
        return jsonify({"success": True, "imported": imported, "message": f"{imported} students imported"})

    @app.route("/api/students/<int:student_pk>", methods=["DELETE"], endpoint="students_delete")
    @login_required
    @api_errors
    def students_delete(student_pk: int):
        student = container.student_service.get_student(student_pk)
        _own(student.class_id)
        container.student_service.remove_student(student_pk)
        return jsonify({"success": True})
