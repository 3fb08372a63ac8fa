from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_identity, json_endpoint, require_manager
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard_stats")
    @json_endpoint
    def dashboard_stats():
        require_manager(current_identity())
        return jsonify(container.dashboard_service.get_dashboard_stats().to_dict())

    @app.route("/api/staff-overview", methods=["GET"], endpoint="staff_overview")
    @json_endpoint
    def staff_overview():
        require_manager(current_identity())
        return jsonify([row.to_dict() for row in container.shift_ledger.staff_overview()])

    @app.route("/api/active-staff", methods=["GET"], endpoint="active_staff")
    @json_endpoint
    def active_staff():
        require_manager(current_identity())
        return jsonify([row.to_dict() for row in container.shift_ledger.active_staff()])
