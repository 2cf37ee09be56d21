"""Structured JSON logging with request correlation."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from flask import Flask, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")

# ``extra=`` keys copied verbatim into the JSON payload
EXTRA_KEYS = (
    "endpoint",
    "elapsed_ms",
    "seller_id",
    "product_id",
    "count",
    "code",
    "status",
)


class JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        for key in EXTRA_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class RequestIdFilter(logging.Filter):
    """Stamp every record with the current ``request_id`` (or ``None``)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = ensure_request_id() if has_request_context() else None
        return True


def ensure_request_id() -> str:
    """Request id from ``g``, then the correlation headers, else a new uuid4."""

    if not has_request_context():
        return str(uuid4())
    if hasattr(g, "request_id"):
        return g.request_id  # type: ignore[no-any-return]
    for header in CORRELATION_HEADERS:
        value = request.headers.get(header)
        if value:
            g.request_id = value
            return value
    g.request_id = str(uuid4())
    return g.request_id  # type: ignore[no-any-return]


def configure_logging(level: str | int = "INFO") -> None:
    """Send root logging to stdout as JSON at ``level``."""

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        root.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    else:
        root.setLevel(level)


def init_app(app: Flask) -> None:
    """Seed request ids and echo them back on every response."""

    app.logger.addFilter(RequestIdFilter())

    @app.before_request
    def _seed_request_id() -> None:
        ensure_request_id()

    @app.after_request
    def _inject_response_header(response):
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        return response


__all__ = ["configure_logging", "init_app", "ensure_request_id", "JSONFormatter"]
