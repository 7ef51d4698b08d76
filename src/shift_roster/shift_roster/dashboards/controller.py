from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.web import role_required
from ..container import Container
from ..core.enums import Role


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard/manager", methods=["GET"], endpoint="manager_dashboard")
    @role_required(Role.MANAGER)
    def manager_dashboard(actor):
        view = container.dashboard_service.manager_view(actor=actor, search=request.args.get("search"))
        return jsonify(asdict(view))

    @app.route("/api/dashboard/hr", methods=["GET"], endpoint="hr_dashboard")
    @role_required(Role.HR)
    def hr_dashboard(actor):
        return jsonify(asdict(container.dashboard_service.hr_view(actor=actor)))

    @app.route("/api/dashboard/admin", methods=["GET"], endpoint="admin_dashboard")
    @role_required(Role.ADMIN)
    def admin_dashboard(actor):
        return jsonify(asdict(container.dashboard_service.admin_view(actor=actor)))
