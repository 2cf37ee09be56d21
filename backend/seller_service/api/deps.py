"""Shared API helpers: the auth gateway, service builders and response utils."""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable
from http import HTTPStatus
from typing import Any, TypeVar

from flask import Response, current_app, g, jsonify, request
from marshmallow import Schema

from seller_service.core.container import get_container
from seller_service.core.errors import APIError, Unauthorized
from seller_service.core.logger import ensure_request_id
from seller_service.services._shared.base import ServiceContext
from seller_service.services._shared.errors import TokenExpiredError, TokenInvalidError
from seller_service.services.auth.service import AuthService
from seller_service.services.catalog.service import CatalogService
from seller_service.services.products.service import ProductService
from seller_service.services.sellers.service import SellerService
from seller_service.services.tokens.service import TokenService

F = TypeVar("F", bound=Callable[..., Any])

log = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


# --------------------------------------------------------------------------- #
# Auth gateway
# --------------------------------------------------------------------------- #


def authenticate_request() -> str:
    """
    Validate the ``Authorization`` header and return the seller id.

    Terminal states, checked in order:

    1. header missing or not ``Bearer <token>`` -> 401 ``AUTH_REQUIRED``
    2. empty token segment -> 401 ``TOKEN_MISSING``
    3. bad signature / malformed -> 401 ``INVALID_TOKEN``
    4. past expiry -> 401 ``TOKEN_EXPIRED``

    Any other failure while verifying becomes a 500 ``AUTH_ERROR``.
    """
    header = request.headers.get("Authorization", "")
    if not header.startswith(BEARER_PREFIX):
        raise Unauthorized("Authentication required", code="AUTH_REQUIRED")

    parts = header.split(" ")
    token = parts[1] if len(parts) > 1 else ""
    if not token:
        raise Unauthorized("Token missing", code="TOKEN_MISSING")

    try:
        return token_service().verify_access_token(token)
    except TokenExpiredError as exc:
        raise Unauthorized("Token expired", code="TOKEN_EXPIRED") from exc
    except TokenInvalidError as exc:
        raise Unauthorized("Invalid token", code="INVALID_TOKEN") from exc
    except Exception as exc:
        log.error("Token verification failed unexpectedly", exc_info=True)
        raise APIError(
            "Authentication failed",
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            code="AUTH_ERROR",
        ) from exc


def require_auth(func: F) -> F:
    """Reject the request unless it carries a valid access token."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        g.seller_id = authenticate_request()
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_seller_id() -> str:
    """Seller id attached by :func:`require_auth`."""
    seller_id = g.get("seller_id")
    if not seller_id:
        raise Unauthorized("Authentication required", code="AUTH_REQUIRED")
    return str(seller_id)


# --------------------------------------------------------------------------- #
# Service builders
# --------------------------------------------------------------------------- #


def service_context() -> ServiceContext:
    return ServiceContext(actor_id=g.get("seller_id"), request_id=ensure_request_id())


def token_service() -> TokenService:
    container = get_container()
    return TokenService(
        token_provider=container.token_provider,
        token_cfg=container.token_cfg,
        ctx=service_context(),
    )


def auth_service() -> AuthService:
    return AuthService(token_service=token_service(), ctx=service_context())


def seller_service() -> SellerService:
    return SellerService(ctx=service_context())


def product_service() -> ProductService:
    container = get_container()
    return ProductService(
        blob_store=container.blob_store,
        limits=container.upload_limits,
        ctx=service_context(),
    )


def catalog_service() -> CatalogService:
    return CatalogService(ctx=service_context())


# --------------------------------------------------------------------------- #
# Request / response helpers
# --------------------------------------------------------------------------- #


def load_json(schema: Schema) -> dict[str, Any]:
    """Validate the JSON body with ``schema`` (errors become 400 problems)."""
    return schema.load(request.get_json(silent=True) or {})


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request.endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
