from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..common.logging import get_logger
from ..core.enums import ValidationKind
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

log = get_logger(__name__)


def status_for(exc: DomainError) -> int:
    if isinstance(exc, ValidationError):
        return 409 if exc.validation_kind == ValidationKind.DATE_CONFLICT else 400
    if isinstance(exc, ConflictError):
        return 409
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, AuthenticationError):
        return 401
    if isinstance(exc, AuthorizationError):
        return 403
    return 400


def _body(kind: str, message: str, **details) -> dict:
    body = {"error": kind, "message": message}
    body.update({k: v for k, v in details.items() if v is not None})
    return body


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        status = status_for(exc)
        details = {}
        if getattr(exc, "existing_start_date", None) is not None:
            details = {
                "startDate": exc.start_date.isoformat(),
                "endDate": exc.end_date.isoformat(),
                "conflictStartDate": exc.existing_start_date.isoformat(),
                "conflictEndDate": exc.existing_end_date.isoformat(),
            }
        log.info("request failed: %s", exc, extra={"status": status, "kind": exc.kind})
        return jsonify(_body(exc.kind, str(exc), **details)), status

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return jsonify(_body(exc.name, exc.description or exc.name)), exc.code or 500

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        log.exception("unhandled error")
        return jsonify(_body("InternalError", "Internal server error")), 500
