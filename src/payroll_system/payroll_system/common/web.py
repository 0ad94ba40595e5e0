"""Helpers shared by the Flask controllers: auth guard, request parsing, error mapping."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import wraps
from typing import Any

from flask import jsonify, request, session

from ..core.enums import ErrorKind
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(p[:1].upper() + p[1:] for p in rest)


def from_wire(payload: Mapping[str, Any], fields: tuple[str, ...]) -> dict[str, Any]:
    """Pick snake_case fields out of a camelCase JSON body."""
    return {f: payload.get(to_camel(f)) for f in fields if to_camel(f) in payload}


def json_body() -> dict:
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    # Plain HTML forms post urlencoded fields.
    return request.form.to_dict()


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"message": "Unauthorized: Please login"}), 401
        return view(*args, **kwargs)

    return wrapper


def error_response(exc: DomainError):
    body: dict[str, Any] = {"message": str(exc)}
    if isinstance(exc, ValidationError):
        if exc.errors:
            body["errors"] = [{**e.to_dict(), "field": to_camel(e.field)} for e in exc.errors]
        status = 409 if exc.has_kind(ErrorKind.DUPLICATE_KEY) else 400
    elif isinstance(exc, AuthenticationError):
        status = 401
    elif isinstance(exc, AuthorizationError):
        status = 403
    elif isinstance(exc, NotFoundError):
        status = 404
    else:
        status = 400
    return jsonify(body), status


def handles_errors(action: str):
    """Turn DomainErrors into JSON error responses and log anything unexpected."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                return error_response(e)
            except Exception:
                logger.exception("Unexpected error while %s", action)
                return jsonify({"message": "Database error"}), 500

        return wrapper

    return decorator
