"""Storage of users in a MongoDB collection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pymongo
from pymongo.errors import PyMongoError

from .models import User
from .mongo import get_collection

_OPERATION_TIMEOUT = 5


class UserNotFoundError(LookupError):
    """Raised when no user can be read for an identifier."""


@dataclass
class UserService:
    """Create, read, update and delete users in ``collection``."""

    collection: Any

    def create_user(self, user):
        """Insert ``user`` as a new document."""
        with pymongo.timeout(_OPERATION_TIMEOUT):
            self.collection.insert_one(user.to_json())

    def get_user(self, user_id):
        """Same as :meth:`get_user_by_id`."""
        return self.get_user_by_id(user_id)

    def get_user_by_id(self, user_id):
        """Return the user stored under ``user_id``."""
        try:
            with pymongo.timeout(_OPERATION_TIMEOUT):
                document = self.collection.find_one({"_id": user_id})
            if document is None:
                raise UserNotFoundError("user not found")
            return User.from_json(document)
        except (PyMongoError, ValueError) as exc:
            raise UserNotFoundError("user not found") from exc

    def update_user(self, user_id, user):
        """Overwrite the fields of the user stored under ``user_id``."""
        with pymongo.timeout(_OPERATION_TIMEOUT):
            self.collection.update_one({"_id": user_id}, {"$set": user.to_json()})

    def delete_user(self, user_id):
        """Delete the user stored under ``user_id``, if any."""
        with pymongo.timeout(_OPERATION_TIMEOUT):
            self.collection.delete_one({"_id": user_id})


def new_user_service(database_name):
    """Return a service bound to the ``users`` collection of ``database_name``."""
    return UserService(get_collection(database_name, "users"))