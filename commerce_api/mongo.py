"""Process-wide MongoDB client."""

from __future__ import annotations

import logging

from pymongo import MongoClient

logger = logging.getLogger(__name__)

_CONNECT_TIMEOUT_MS = 10_000

_client = None


def connect_mongodb(uri):
    """Create the shared MongoDB client for ``uri`` and return it.

    An invalid URI raises the driver's configuration error.
    """
    global _client
    try:
        client = MongoClient(uri, serverSelectionTimeoutMS=_CONNECT_TIMEOUT_MS)
    except Exception:
        logger.error("Failed to create MongoDB client for %s", uri)
        raise
    if _client is not None:
        _client.close()
    _client = client
    logger.info("Connected to MongoDB")
    return client


def get_collection(database, collection):
    """Return ``collection`` of ``database`` from the shared client."""
    if _client is None:
        raise RuntimeError("MongoDB client is not connected")
    return _client[database][collection]