from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import json_body, login_required, role_required
from ..container import Container
from ..core.enums import Role
from .model import SHIFT_TYPE_CATALOG, entry_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shift-types", methods=["GET"], endpoint="shift_types")
    def shift_types():
        return jsonify(
            [{"value": t.value.value, "label": t.label, "description": t.description} for t in SHIFT_TYPE_CATALOG]
        )

    @app.route("/api/shift-entries", methods=["GET"], endpoint="list_shift_entries")
    @login_required
    def list_shift_entries(actor):
        entries = container.shift_entry_service.list_entries(
            actor=actor,
            employee_id=request.args.get("employee_id") or None,
        )
        return jsonify([entry_to_dict(e) for e in entries])

    @app.route("/api/shift-entries", methods=["POST"], endpoint="submit_shift_entry")
    @role_required(Role.EMPLOYEE)
    def submit_shift_entry(actor):
        data = json_body()
        entry = container.shift_entry_service.submit(
            actor=actor,
            work_date=data.get("date", ""),
            shift_type=data.get("shift_type", ""),
            other_remark=data.get("other_remark"),
        )
        return jsonify(entry_to_dict(entry)), 201

    @app.route("/api/shift-entries/week", methods=["GET"], endpoint="shift_entry_week")
    @role_required(Role.EMPLOYEE)
    def shift_entry_week(actor):
        return jsonify(container.shift_entry_service.week_overview(actor=actor, anchor=request.args.get("anchor")))

    @app.route("/api/shift-entries/<entry_id>/approve", methods=["POST"], endpoint="approve_shift_entry")
    @role_required(Role.MANAGER)
    def approve_shift_entry(actor, entry_id: str):
        entry = container.shift_entry_service.approve(actor=actor, entry_id=entry_id)
        return jsonify(entry_to_dict(entry))

    @app.route("/api/shift-entries/<entry_id>/reject", methods=["POST"], endpoint="reject_shift_entry")
    @role_required(Role.MANAGER)
    def reject_shift_entry(actor, entry_id: str):
        entry = container.shift_entry_service.reject(
            actor=actor,
            entry_id=entry_id,
            justification=json_body().get("justification", ""),
        )
        return jsonify(entry_to_dict(entry))
