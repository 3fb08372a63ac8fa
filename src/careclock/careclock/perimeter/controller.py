from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_identity, json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/perimeter", methods=["GET"], endpoint="get_perimeter")
    @json_endpoint
    def get_perimeter():
        current_identity()
        perimeter = container.perimeter_service.get()
        return jsonify({"perimeter": perimeter.to_dict() if perimeter else None})

    @app.route("/api/perimeter", methods=["PUT"], endpoint="set_perimeter")
    @json_endpoint
    def set_perimeter():
        editor = container.perimeter_service.acquire_editor(current_identity())
        data = request.get_json(silent=True) or {}
        perimeter = editor.replace(data.get("center"), data.get("radius_km"))
        return jsonify({"success": True, "message": "Perimeter updated successfully", "perimeter": perimeter.to_dict()})
