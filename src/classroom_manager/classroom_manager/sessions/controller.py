from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, current_professor_id, login_required, to_jsonable
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes/<int:class_id>/sessions", methods=["GET"], endpoint="sessions_list")
    @login_required
    @api_errors
    def sessions_list(class_id: int):
        container.class_service.get_class(class_id, professor_id=current_professor_id())
        sessions = container.session_service.list_sessions(class_id)
        return jsonify({"success": True, "sessions": to_jsonable(sessions)})

    @app.route("/api/classes/<int:class_id>/sessions", methods=["POST"], endpoint="sessions_create")
    @login_required
    @api_errors
    def sessions_create(class_id: int):
        container.class_service.get_class(class_id, professor_id=current_professor_id())
        session_id = container.session_service.create_session(class_id)
        return jsonify({"success": True, "session_id": session_id}), 201
