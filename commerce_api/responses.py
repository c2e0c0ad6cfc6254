"""Uniform JSON response envelopes."""

from __future__ import annotations

import json
from http import HTTPStatus

from flask import Response


def send_response(status_code, message, data):
    """Build a JSON response with status text, message and optional data."""
    try:
        status_text = HTTPStatus(status_code).phrase
    except ValueError:
        status_text = ""
    body = {"status": status_text, "message": message}
    if data is not None:
        body["data"] = data
    return Response(json.dumps(body), status=status_code, mimetype="application/json")


def send_error(status_code, message):
    """Build a JSON error response carrying only status text and message."""
    return send_response(status_code, message, None)