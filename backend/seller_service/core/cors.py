"""Cross-origin policy for the storefront and seller dashboard."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

ALLOWED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization", "X-Request-ID"]


def parse_origins(raw: str | None) -> list[str]:
    return [origin.strip() for origin in (raw or "").split(",") if origin.strip()]


def init_app(app: Flask) -> None:
    """
    Apply ``CORS_ORIGINS`` to ``/api/*``.

    A blank value or ``*`` opens every origin, and credentials are then
    turned off because browsers refuse credentialed wildcard responses.
    """
    origins = parse_origins(app.config.get("CORS_ORIGINS"))
    open_policy = origins in ([], ["*"])

    CORS(
        app,
        resources={r"/api/*": {"origins": "*" if open_policy else origins}},
        supports_credentials=not open_policy,
        methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
        expose_headers=["X-Request-ID"],
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
