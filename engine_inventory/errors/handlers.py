from flask import request
from werkzeug.exceptions import HTTPException

from ..http import api_error
from .exceptions import AppError


def register_error_handlers(app):
    """Register app-level error handlers.

    Service errors (AppError subclasses) become JSON error payloads carrying
    the error code and, when known, the offending field.
    """

    @app.errorhandler(AppError)
    def handle_app_error(e: AppError):
        if e.status >= 500:
            app.logger.error("%s: %s", e.code, e.message)
        details = {"field": e.field} if e.field else None
        return api_error(e.status, e.code, e.message, details)

    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        if request.path.startswith("/api") or request.is_json:
            return api_error(e.code or 500, e.name.upper().replace(" ", "_"), e.description)
        return e

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        app.logger.exception("Unhandled error")
        return api_error(500, "INTERNAL_SERVER_ERROR", "unexpected server error")
