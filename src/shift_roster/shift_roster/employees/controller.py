from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import json_body, role_required, sign_in
from ..container import Container
from ..core.enums import Role
from .model import IdentityResolution, employee_to_dict
from .shift_options import registration_menu



def _resolution_json(resolution: IdentityResolution) -> dict:
    return {
        "status": resolution.status.value,
        "employee": employee_to_dict(resolution.employee) if resolution.employee else None,
        "created": resolution.created,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/registration/options", methods=["GET"], endpoint="registration_options")
    def registration_options():
        return jsonify(registration_menu())

    @app.route("/api/employees/resolve", methods=["GET"], endpoint="resolve_employee")
    def resolve_employee():
        resolution = container.employee_service.resolve_identity(request.args.get("code", ""))
        return jsonify(_resolution_json(resolution))

    @app.route("/api/employees/register", methods=["POST"], endpoint="register_employee")
    def register_employee():
        data = json_body()
        resolution = container.employee_service.register(
            code=data.get("code", ""),
            full_name=data.get("full_name", ""),
            department=data.get("department", ""),
            shift_system=data.get("shift_system"),
            shift_option=data.get("shift_option"),
            shift_group=data.get("shift_group"),
        )
        return jsonify(_resolution_json(resolution)), 201 if resolution.created else 200

    @app.route("/api/employees/login", methods=["POST"], endpoint="employee_login")
    def employee_login():
        data = json_body()
        actor = container.employee_service.login(data.get("code", ""))
        sign_in(actor, remember=bool(data.get("remember_me")))
        return jsonify(actor.to_session())

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @role_required(Role.MANAGER, Role.HR, Role.ADMIN)
    def list_employees(actor):
        employees = container.employee_service.list_employees(actor=actor)
        return jsonify([employee_to_dict(e) for e in employees])

    @app.route("/api/admin/employees/<employee_id>/approve", methods=["POST"], endpoint="approve_employee")
    @role_required(Role.ADMIN)
    def approve_employee(actor, employee_id: str):
        employee = container.employee_service.approve(actor=actor, employee_id=employee_id)
        return jsonify(employee_to_dict(employee))

    @app.route("/api/admin/employees/<employee_id>/reject", methods=["POST"], endpoint="reject_employee")
    @role_required(Role.ADMIN)
    def reject_employee(actor, employee_id: str):
        container.employee_service.reject(actor=actor, employee_id=employee_id)
        return jsonify(deleted=employee_id)
