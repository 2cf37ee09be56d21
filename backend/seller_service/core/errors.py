"""Problem+JSON error responses.

Services raise :class:`ServiceError` subclasses without any HTTP knowledge;
the status for each is decided here. Every body carries ``code`` and
``request_id`` next to the RFC 7807 members.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, current_app, jsonify, request
from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.exc import IntegrityError, OperationalError
from werkzeug.exceptions import HTTPException

from seller_service.core.logger import ensure_request_id
from seller_service.services._shared.dto import ProblemDetails
from seller_service.services._shared.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    FileTooLargeError,
    NotFoundError,
    ServiceError,
    StorageError,
    UnsupportedMediaTypeError,
    ValidationError,
)

log = logging.getLogger(__name__)

PROBLEM_MIMETYPE = "application/problem+json"

# Subclasses before their bases
SERVICE_ERROR_STATUS: tuple[tuple[type[ServiceError], HTTPStatus], ...] = (
    (UnsupportedMediaTypeError, HTTPStatus.UNSUPPORTED_MEDIA_TYPE),
    (FileTooLargeError, HTTPStatus.REQUEST_ENTITY_TOO_LARGE),
    (ValidationError, HTTPStatus.BAD_REQUEST),
    (AuthenticationError, HTTPStatus.UNAUTHORIZED),
    (AuthorizationError, HTTPStatus.FORBIDDEN),
    (NotFoundError, HTTPStatus.NOT_FOUND),
    (ConflictError, HTTPStatus.BAD_REQUEST),
    (StorageError, HTTPStatus.INTERNAL_SERVER_ERROR),
)

HTTP_ERROR_CODES: dict[int, str] = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    413: "FILE_TOO_LARGE",
    415: "UNSUPPORTED_MEDIA_TYPE",
    429: "TOO_MANY_REQUESTS",
    500: "INTERNAL_ERROR",
    503: "SERVICE_UNAVAILABLE",
}


def status_for(exc: ServiceError) -> int:
    """HTTP status for ``exc``; anything unmapped is a 400."""
    for exc_type, status in SERVICE_ERROR_STATUS:
        if isinstance(exc, exc_type):
            return int(status)
    return int(HTTPStatus.BAD_REQUEST)


def problem(status: int, code: str, message: str, details: dict[str, Any] | None = None) -> tuple[Response, int]:
    """
    Render a problem response for the current request.

    :param code: UPPER_SNAKE_CASE identifier clients switch on.
    :param message: Client-safe ``detail`` text.
    :param details: Extra structured data, omitted when empty.
    """
    extra: dict[str, Any] = {"code": code, "request_id": ensure_request_id()}
    if details:
        extra["details"] = details
    body = ProblemDetails(
        type="about:blank",
        title=HTTPStatus(status).phrase,
        status=int(status),
        detail=message,
        instance=request.path if request else None,
        extra=extra,
    ).to_dict()
    resp = jsonify(body)
    resp.mimetype = PROBLEM_MIMETYPE
    return resp, int(status)


class APIError(Exception):
    """
    Error raised by the HTTP layer itself (auth gateway, request parsing).

    :param message: Client-safe description.
    :param status_code: Response status, 400 unless given.
    :param code: Machine-readable identifier.
    :param details: Optional structured payload.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        code: str = "BAD_REQUEST",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.code = code
        self.details = details or {}


class Unauthorized(APIError):
    """401 raised by the auth gateway."""

    def __init__(self, message: str = "Unauthorized", *, code: str = "UNAUTHORIZED") -> None:
        super().__init__(message, status_code=HTTPStatus.UNAUTHORIZED, code=code)


def _log(status: int, message: str, code: str, *, exc_info: bool = False) -> None:
    extra = {"code": code, "status": status}
    if status >= 500:
        log.error(message, extra=extra, exc_info=exc_info)
    else:
        log.warning(message, extra=extra)


def init_app(app: Flask) -> None:
    """Register problem+json handlers; 5xx are logged as errors, 4xx as warnings."""

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        _log(err.status_code, f"APIError: {err.message}", err.code)
        return problem(err.status_code, err.code, err.message, err.details or None)

    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        status = status_for(err)
        _log(status, f"ServiceError: {err.message}", err.code, exc_info=True)
        return problem(status, err.code, err.message)

    @app.errorhandler(MarshmallowValidationError)
    def handle_validation_error(err: MarshmallowValidationError):
        _log(400, "Request validation failed", "VALIDATION_ERROR")
        return problem(400, "VALIDATION_ERROR", "Validation failed", {"errors": err.messages})

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        code = HTTP_ERROR_CODES.get(status, "ERROR")
        if status == HTTPStatus.NOT_FOUND:
            message = f"Route '{request.path}' not found"
        else:
            message = (err.description or code.replace("_", " ").capitalize()).strip()
        _log(status, f"HTTPException: {message}", code)
        return problem(status, code, message)

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(err: IntegrityError):
        # Raw driver text stays in the log
        log.error("IntegrityError", extra={"code": "CONFLICT", "status": 400}, exc_info=True)
        return problem(400, "CONFLICT", "Resource conflict")

    @app.errorhandler(OperationalError)
    def handle_operational_error(err: OperationalError):
        _log(503, "OperationalError", "SERVICE_UNAVAILABLE", exc_info=True)
        return problem(503, "SERVICE_UNAVAILABLE", "Service temporarily unavailable")

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        _log(500, "Unhandled exception", "INTERNAL_ERROR", exc_info=True)
        details = {"exception": repr(err)} if current_app.debug else None
        return problem(500, "INTERNAL_ERROR", "Unexpected error", details)


__all__ = ["APIError", "Unauthorized", "init_app", "problem", "status_for"]
