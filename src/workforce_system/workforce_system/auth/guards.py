from __future__ import annotations

from functools import wraps

from flask import current_app, g, request

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from .verifier import Principal, TokenVerifier

VERIFIER_KEY = "TOKEN_VERIFIER"


def _bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Missing bearer token")
    return token.strip()


def current_principal() -> Principal:
    principal = g.get("principal")
    if principal is None:
        raise AuthenticationError("Request is not authenticated")
    return principal


def token_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        verifier: TokenVerifier = current_app.extensions[VERIFIER_KEY]
        g.principal = verifier.verify(_bearer_token())
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    @token_required
    def wrapper(*args, **kwargs):
        if current_principal().role != Role.ADMIN:
            raise AuthorizationError("Admin role required")
        return view(*args, **kwargs)

    return wrapper
