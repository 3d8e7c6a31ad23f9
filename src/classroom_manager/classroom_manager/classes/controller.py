from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_errors, current_professor_id, login_required, to_jsonable
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/classes", methods=["GET"], endpoint="classes_list")
    @login_required
    @api_errors
    def classes_list():
        items = container.class_service.list_dashboard(current_professor_id())
        return jsonify({"success": True, "classes": to_jsonable(items)})

    @app.route("/api/classes", methods=["POST"], endpoint="classes_create")
    @login_required
    @api_errors
    def classes_create():
        data = request.get_json(silent=True) or {}
        class_id = container.class_service.create_class(
            professor_id=current_professor_id(),
            name=str(data.get("name") or ""),
            code=data.get("code"),
            term=data.get("term"),
        )
        return jsonify({"success": True, "class_id": class_id}), 201

    @app.route("/api/classes/<int:class_id>", methods=["GET"], endpoint="classes_detail")
    @login_required
    @api_errors
    def classes_detail(class_id: int):
        c = container.class_service.get_class(class_id, professor_id=current_professor_id())
        return jsonify({"success": True, "class": to_jsonable(c)})
