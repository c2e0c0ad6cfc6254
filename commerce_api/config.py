"""Application settings read from the environment and an optional .env file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_SIGNING_ENV = "JWT_SECRET"


@dataclass(frozen=True)
class Config:
    """Runtime settings for the service."""

    port: str
    jwt_secret: str
    database_url: str
    database_name: str


def get_env(key, default_value):
    """Return the environment variable ``key``, or ``default_value`` if it is unset."""
    return os.environ.get(key, default_value)


def load_config():
    """Load ``.env`` from the working directory, then build a :class:`Config`."""
    env_file = Path(".env")
    if env_file.is_file():
        load_dotenv(env_file)
    else:
        logger.warning("Warning: .env file not found, using default values")
    signing = get_env(_SIGNING_ENV, "secret")
    return Config(
        port=get_env("PORT", "8080"),
        jwt_secret=signing,
        database_url=get_env("DATABASE_URL", "mongodb://localhost:27017"),
        database_name=get_env("DATABASE_NAME", "gin-commerce"),
    )