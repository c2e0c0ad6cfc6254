"""Request handlers for phone sign-in and user management."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any

from flask import jsonify, request

from .auth_service import AuthService
from .models import User
from .responses import send_error, send_response

logger = logging.getLogger(__name__)


def _json_body():
    return request.get_json(force=True, silent=True)


def _required_strings(*names):
    """Return the named non-empty string fields of the JSON request body."""
    data = _json_body()
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    values = []
    for name in names:
        value = data.get(name)
        if not isinstance(value, str) or not value:
            raise ValueError(f"field {name!r} is required")
        values.append(value)
    return values


def _user_from_body():
    data = _json_body()
    if data is None:
        raise ValueError("request body must be JSON")
    return User.from_json(data)


def _json(status, body):
    response = jsonify(body)
    response.status_code = int(status)
    return response


@dataclass
class AuthController:
    """Handlers for requesting a one-time password and signing in with it."""

    auth_service: Any = field(default_factory=AuthService)

    def sign_up(self):
        """Issue a one-time password for the posted phone number."""
        try:
            (phone_number,) = _required_strings("phone_number")
        except ValueError:
            return send_error(HTTPStatus.BAD_REQUEST, "Invalid input")
        try:
            otp = self.auth_service.generate_otp(phone_number)
        except Exception:
            logger.exception("OTP generation failed")
            return send_error(HTTPStatus.INTERNAL_SERVER_ERROR, "Error generating OTP")
        return send_response(HTTPStatus.OK, "OTP sent", {"otp": otp})

    def sign_in(self):
        """Exchange a phone number and one-time password for a token."""
        try:
            phone_number, otp = _required_strings("phone_number", "otp")
        except ValueError:
            return send_error(HTTPStatus.BAD_REQUEST, "Invalid input")
        try:
            token = self.auth_service.validate_otp(phone_number, otp)
        except Exception:
            return send_error(HTTPStatus.UNAUTHORIZED, "Invalid OTP")
        return send_response(HTTPStatus.OK, "Sign in successful", {"token": token})


@dataclass
class UserController:
    """Handlers for creating, reading, updating and deleting users."""

    user_service: Any

    def create_user(self):
        """Store the user posted in the request body."""
        try:
            user = _user_from_body()
        except ValueError:
            return _json(HTTPStatus.BAD_REQUEST, {"error": "Invalid input"})
        try:
            self.user_service.create_user(user)
        except Exception:
            logger.exception("creating user failed")
            return _json(HTTPStatus.INTERNAL_SERVER_ERROR, {"error": "Failed to create user"})
        return _json(HTTPStatus.CREATED, {"message": "User created successfully"})

    def get_user(self, user_id):
        """Return the user stored under ``user_id``."""
        try:
            user = self.user_service.get_user(user_id)
        except Exception:
            return _json(HTTPStatus.NOT_FOUND, {"error": "User not found"})
        return _json(HTTPStatus.OK, user.to_json())

    def get_user_by_id(self, user_id):
        """Return the user stored under ``user_id``."""
        try:
            user = self.user_service.get_user_by_id(user_id)
        except Exception:
            return _json(HTTPStatus.NOT_FOUND, {"error": "User not found"})
        return _json(HTTPStatus.OK, user.to_json())

    def update_user(self, user_id):
        """Overwrite the user stored under ``user_id`` with the request body."""
        try:
            user = _user_from_body()
        except ValueError:
            return _json(HTTPStatus.BAD_REQUEST, {"error": "Invalid input"})
        try:
            self.user_service.update_user(user_id, user)
        except Exception:
            logger.exception("updating user %s failed", user_id)
            return _json(HTTPStatus.INTERNAL_SERVER_ERROR, {"error": "Failed to update user"})
        return _json(HTTPStatus.OK, {"message": "User updated successfully"})

    def delete_user(self, user_id):
        """Delete the user stored under ``user_id``."""
        try:
            self.user_service.delete_user(user_id)
        except Exception:
            logger.exception("deleting user %s failed", user_id)
            return _json(HTTPStatus.INTERNAL_SERVER_ERROR, {"error": "Failed to delete user"})
        return _json(HTTPStatus.OK, {"message": "User deleted successfully"})