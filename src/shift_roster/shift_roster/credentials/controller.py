from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_actor, json_body, sign_in, sign_out
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/managers/groups", methods=["GET"], endpoint="manager_groups")
    def manager_groups():
        groups = container.auth_service.list_manager_groups()
        return jsonify(
            [
                {"name": g.name, "slots": [{"manager_id": s.manager_id, "title": s.title} for s in g.slots]}
                for g in groups
            ]
        )

    @app.route("/api/auth/manager", methods=["POST"], endpoint="manager_login")
    def manager_login():
        data = json_body()
        actor = container.auth_service.authenticate_manager(data.get("manager_id", ""), data.get("password", ""))
        sign_in(actor)
        return jsonify(actor.to_session())

    @app.route("/api/auth/hr", methods=["POST"], endpoint="hr_login")
    def hr_login():
        actor = container.auth_service.authenticate_hr(json_body().get("code", ""))
        sign_in(actor)
        return jsonify(actor.to_session())

    @app.route("/api/auth/admin", methods=["POST"], endpoint="admin_login")
    def admin_login():
        actor = container.auth_service.authenticate_admin(json_body().get("code", ""))
        sign_in(actor)
        return jsonify(actor.to_session())

    @app.route("/api/auth/me", methods=["GET"], endpoint="whoami")
    def whoami():
        actor = current_actor()
        if actor is None:
            return jsonify(error="Not signed in"), 401
        return jsonify(actor.to_session())

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        sign_out()
        return jsonify(ok=True)
