"""Bearer-token authentication for request handlers."""

from __future__ import annotations

import functools
from http import HTTPStatus

import jwt
from flask import jsonify, request

from .auth_service import JWT_SECRET

_HMAC_ALGORITHMS = ["HS256", "HS384", "HS512"]
_BEARER_PREFIX = "Bearer "


class AuthorizationError(Exception):
    """Raised when a request carries no valid bearer token."""


def verify_authorization(auth_header):
    """Check an ``Authorization`` header value and return the token's claims."""
    if not auth_header:
        raise AuthorizationError("Authorization header is required")
    token = auth_header.removeprefix(_BEARER_PREFIX)
    try:
        return jwt.decode(token, JWT_SECRET, algorithms=_HMAC_ALGORITHMS)
    except jwt.PyJWTError as exc:
        raise AuthorizationError("Invalid token") from exc


def jwt_required(view):
    """Reject requests to ``view`` that lack a valid HMAC-signed token."""

    @functools.wraps(view)
    def wrapper(*args, **kwargs):
        try:
            verify_authorization(request.headers.get("Authorization", ""))
        except AuthorizationError as exc:
            return jsonify({"error": str(exc)}), HTTPStatus.UNAUTHORIZED
        return view(*args, **kwargs)

    return wrapper