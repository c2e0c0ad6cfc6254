"""One-time password generation and checking."""

from __future__ import annotations

import hmac
import secrets

OTP_LENGTH = 6
_OTP_RANGE = 10**OTP_LENGTH


def generate_otp():
    """Return a random numeric code of exactly :data:`OTP_LENGTH` digits."""
    return f"{secrets.randbelow(_OTP_RANGE):0{OTP_LENGTH}d}"


def validate_otp(input_otp, generated_otp):
    """Return whether the supplied code matches the generated one."""
    return hmac.compare_digest(input_otp.encode(), generated_otp.encode())