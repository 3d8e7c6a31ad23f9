from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, current_professor_id, json_error, login_required
from ..container import Container
from .model import AttendanceSheet


def _sheet_json(sheet: AttendanceSheet) -> dict:
    return {
        "session_id": sheet.session_id,
        "statuses": {str(pk): status.value for pk, status in sheet.statuses.items()},
    }


def register(app: Flask, container: Container) -> None:
    def _own_session(session_id: int) -> None:
        sess = container.session_service.get_session(session_id)
        container.class_service.get_class(sess.class_id, professor_id=current_professor_id())

    @app.route("/api/sessions/<int:session_id>/attendance", methods=["GET"], endpoint="attendance_sheet")
    @login_required
    @api_errors
    def attendance_sheet(session_id: int):
        _own_session(session_id)
        sheet = container.attendance_service.open_sheet(session_id)
        return jsonify({"success": True, **_sheet_json(sheet)})

    @app.route("/api/sessions/<int:session_id>/attendance", methods=["PUT"], endpoint="attendance_save")
    @login_required
    @api_errors
    def attendance_save(session_id: int):
        """Body: {"statuses": {"<student pk>": "present" | "absent" | "late"}}.

        Students left out keep what the opened sheet had for them.
        """

        _own_session(session_id)
        data = request.get_json(silent=True) or {}
        changes = data.get("statuses")
        if not isinstance(changes, dict):
            return json_error("statuses must be an object", 400)

        svc = container.attendance_service
        sheet = svc.open_sheet(session_id)
        for pk, status in changes.items():
            try:
                student_pk = int(pk)
            except (TypeError, ValueError):
                return json_error(f"Invalid student id: {pk!r}", 400)
            sheet = svc.mark(sheet, student_pk, status)

        saved = svc.save_sheet(sheet)
        return jsonify({"success": True, "saved": saved, **_sheet_json(sheet)})
