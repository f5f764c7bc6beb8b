from __future__ import annotations

import uuid
from flask import Flask, g, request

REQUEST_ID_HEADER = "X-Request-ID"

# Longer incoming ids are replaced rather than echoed back
MAX_REQUEST_ID_LENGTH = 128


def current_request_id() -> str | None:
    return g.get("request_id")


def install_request_id(app: Flask) -> None:
    """Tag every request with an id and return it in the response headers."""

    @app.before_request
    def _assign_request_id():
        incoming = (request.headers.get(REQUEST_ID_HEADER) or "").strip()
        if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH:
            g.request_id = incoming
        else:
            g.request_id = uuid.uuid4().hex

    @app.after_request
    def _echo_request_id(response):
        rid = current_request_id()
        if rid:
            response.headers[REQUEST_ID_HEADER] = rid
        return response
