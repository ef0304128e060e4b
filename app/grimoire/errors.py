"""
JSON error responses.

Handlers raise an ``ApiError`` subclass for the expected failures (bad input,
wrong password, missing record, duplicate). Anything else is caught by
``api_errors``, logged with its traceback and answered with a generic 500.
"""
from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import Flask, current_app, g, jsonify
from werkzeug.exceptions import HTTPException


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str, **extra: Any) -> None:
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_response(self):
        body = {"error": self.message}
        body.update(self.extra)
        return jsonify(body), self.status_code


class ValidationError(ApiError):
    status_code = 400


class Unauthorized(ApiError):
    status_code = 401


class NotFound(ApiError):
    status_code = 404


class Conflict(ApiError):
    status_code = 409


class TooManyRequests(ApiError):
    status_code = 429


def _rollback_request_session() -> None:
    s = getattr(g, "db_session", None)
    if s is not None:
        s.rollback()


def api_errors(message: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Wrap a view so unexpected failures become ``{"error": message}`` with a 500."""

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(fn)
        def wrapped(*args: Any, **kwargs: Any):
            try:
                return fn(*args, **kwargs)
            except (ApiError, HTTPException):
                _rollback_request_session()
                raise
            except Exception:
                _rollback_request_session()
                current_app.logger.exception(
                    "%s (endpoint=%s request_id=%s)", message, fn.__name__, getattr(g, "request_id", None)
                )
                return jsonify({"error": message}), 500

        return wrapped

    return decorator


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ApiError)
    def _api_error(e: ApiError):  # type: ignore[no-redef]
        if e.status_code >= 500:
            app.logger.error("API error: %s", e.message)
        return e.to_response()

    @app.errorhandler(404)
    def _err_404(e):  # type: ignore[no-redef]
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def _err_405(e):  # type: ignore[no-redef]
        return jsonify({"error": "Method not allowed"}), 405

    @app.errorhandler(413)
    def _err_413(e):  # type: ignore[no-redef]
        return jsonify({"error": "Request body too large"}), 413

    @app.errorhandler(500)
    def _err_500(e):  # type: ignore[no-redef]
        app.logger.exception("Unhandled 500 (request_id=%s)", getattr(g, "request_id", None))
        return jsonify({"error": "Internal server error"}), 500
