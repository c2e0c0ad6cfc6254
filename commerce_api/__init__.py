"""Flask building blocks for OTP sign-in, JWT checks and MongoDB user storage."""

__version__ = "0.1.0"