from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import Flask, g, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DataAccessError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .actor import ActorContext

logger = logging.getLogger(__name__)

SESSION_KEY = "actor"


def current_actor() -> Optional[ActorContext]:
    if "actor" not in g:
        g.actor = ActorContext.from_session(session.get(SESSION_KEY))
    return g.actor


def sign_in(actor: ActorContext, *, remember: bool = False) -> None:
    session.clear()
    session.permanent = bool(remember)
    session[SESSION_KEY] = actor.to_session()
    g.actor = actor


def sign_out() -> None:
    session.clear()
    g.actor = None


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        actor = current_actor()
        if actor is None:
            return jsonify(error="Please sign in to continue"), 401
        return view(actor, *args, **kwargs)

    return wrapper


def role_required(*roles: Role):
    """Pass the request actor as the view's first argument when its role is allowed."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            actor = current_actor()
            if actor is None:
                return jsonify(error="Please sign in to continue"), 401
            if actor.role not in roles:
                return jsonify(error="You do not have permission"), 403
            return view(actor, *args, **kwargs)

        return wrapper

    return decorator


def register_error_handlers(app: Flask) -> None:
    status_by_error = (
        (NotFoundError, 404),
        (ValidationError, 400),
        (AuthenticationError, 401),
        (AuthorizationError, 403),
    )

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        if isinstance(e, DataAccessError):
            logger.error("Data access failure on %s %s: %s", request.method, request.path, e)
            return jsonify(error="System error, please try again"), 500
        for cls, status in status_by_error:
            if isinstance(e, cls):
                return jsonify(error=str(e)), status
        return jsonify(error=str(e)), 400

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        # Let Flask render its own HTTP errors (404 routes, 405 ...).
        if isinstance(e, HTTPException):
            return jsonify(error=e.description), e.code
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if app.config.get("DEBUG"):
            return jsonify(error=f"System error: {e}"), 500
        return jsonify(error="System error, please try again"), 500
