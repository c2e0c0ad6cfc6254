"""Data models exchanged through the API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass


def _field(data, name, kind, default):
    value = data.get(name)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ValueError(f"field {name!r} has the wrong type")
    return value


@dataclass
class User:
    """A registered user."""

    id: int = 0
    phone_number: str = ""
    password: str = ""

    @classmethod
    def from_json(cls, data):
        """Build a user from a decoded JSON object; bad field types raise ValueError."""
        if not isinstance(data, Mapping):
            raise ValueError("user data must be a JSON object")
        user_id = _field(data, "id", int, 0)
        if user_id < 0:
            raise ValueError("field 'id' must be an unsigned integer")
        return cls(
            id=user_id,
            phone_number=_field(data, "phone_number", str, ""),
            password=_field(data, "password", str, ""),
        )

    def to_json(self):
        """Return the user as a JSON-ready dictionary."""
        return asdict(self)