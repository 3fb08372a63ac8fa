from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_datetime
from ..common.web import current_identity, json_endpoint, require_manager
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..container import Container


def _parse_optional_datetime(name: str):
    value = request.args.get(name)
    if not value:
        return None
    try:
        return parse_iso_datetime(value)
    except ValueError:
        raise ValidationError(f"{name} must be an ISO date or timestamp") from None


def register(app: Flask, container: Container) -> None:
    def _target_worker(identity) -> str:
        # Workers may read their own records; managers may read anyone's.
        worker_id = request.args.get("worker_id") or identity.worker_id
        if worker_id != identity.worker_id:
            require_manager(identity)
        return worker_id

    @app.route("/api/clock-in", methods=["POST"], endpoint="clock_in")
    @json_endpoint
    def clock_in():
        identity = current_identity()
        data = request.get_json(silent=True) or {}
        perimeter = container.perimeter_service.get()
        record = container.shift_ledger.clock_in(
            identity,
            data.get("location"),
            perimeter,
            note=data.get("note"),
        )
        return jsonify(record.to_dict()), 201

    @app.route("/api/clock-out", methods=["POST"], endpoint="clock_out")
    @json_endpoint
    def clock_out():
        identity = current_identity()
        data = request.get_json(silent=True) or {}
        record = container.shift_ledger.clock_out(identity, data.get("location"), note=data.get("note"))
        return jsonify(record.to_dict()), 200

    @app.route("/api/clock-status", methods=["GET"], endpoint="clock_status")
    @json_endpoint
    def clock_status():
        worker_id = _target_worker(current_identity())
        record = container.shift_ledger.get_open_shift(worker_id)
        return jsonify({"worker_id": worker_id, "open_shift": record.to_dict() if record else None})

    @app.route("/api/clock-records", methods=["GET"], endpoint="clock_records")
    @json_endpoint
    def clock_records():
        identity = current_identity()
        if identity.role == Role.MANAGER and not request.args.get("worker_id"):
            worker_id = None
        else:
            worker_id = _target_worker(identity)

        records = container.shift_ledger.list_shifts(
            worker_id,
            _parse_optional_datetime("start"),
            _parse_optional_datetime("end"),
        )
        return jsonify([r.to_dict() for r in records])
