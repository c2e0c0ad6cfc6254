"""Phone-number sign-in with simulated one-time passwords."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

JWT_SECRET = "secret"
JWT_ALGORITHM = "HS256"
TOKEN_LIFETIME = timedelta(hours=24)


class InvalidOTPError(Exception):
    """Raised when a one-time password does not match."""


@dataclass(frozen=True)
class AuthService:
    """Issues one-time passwords and exchanges them for signed tokens."""

    jwt_secret: str = JWT_SECRET
    otp: str = "123456"

    def generate_otp(self, phone_number):
        """Return the one-time password for ``phone_number`` (simulated)."""
        return self.otp

    def validate_otp(self, phone_number, otp):
        """Check ``otp`` and return a signed token valid for 24 hours."""
        if otp != self.otp:
            raise InvalidOTPError("invalid OTP")
        expires = datetime.now(timezone.utc) + TOKEN_LIFETIME
        claims = {"phone_number": phone_number, "exp": int(expires.timestamp())}
        return jwt.encode(claims, self.jwt_secret, algorithm=JWT_ALGORITHM)