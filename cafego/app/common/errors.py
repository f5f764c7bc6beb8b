"""Request-scoped failures for the storefront.

A failing request never takes the process down: every error becomes a
response for that request only. Paths under /api get a JSON body, the
storefront pages get the ``error.html`` page.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, NoReturn, Optional

from flask import Flask, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from cafego.app.common.request_context import current_request_id

# Inline so it still renders when templates are the thing that broke
INTERNAL_ERROR_PAGE = (
    "<!doctype html><title>500 Internal Server Error</title>"
    "<h1>Internal Server Error</h1><p>Something went wrong on our side.</p>"
)


@dataclass
class StoreError(Exception):
    status_code: int
    code: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def to_response(self):
        return error_response(self.status_code, self.code, self.message, self.details)


def fail(status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None) -> NoReturn:
    raise StoreError(status_code, code, message, details or {})


def is_api_request() -> bool:
    return request.path == "/api" or request.path.startswith("/api/")


def error_response(status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None):
    if is_api_request():
        body = {
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
                "request_id": current_request_id(),
            }
        }
        return jsonify(body), status_code
    return render_template("error.html", status_code=status_code, message=message), status_code


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(StoreError)
    def handle_store_error(err: StoreError):
        return err.to_response()

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        # 404 for unknown paths, 405 for wrong methods, ...
        message = err.description if is_api_request() else err.name
        return error_response(err.code or 500, "http_error", message, {"name": err.name})

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception on %s %s", request.method, request.path)
        if is_api_request():
            return error_response(500, "internal_error", "Internal server error")
        return INTERNAL_ERROR_PAGE, 500, {"Content-Type": "text/html; charset=utf-8"}
