"""Explicit dependency wiring built once per application."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta

from flask import Flask, current_app

from seller_service.infra.jwt.pyjwt_token_provider import PyJWTTokenProvider
from seller_service.infra.minio_store.minio_blob_store import MinioBlobStore, build_minio_client
from seller_service.services._shared.ports.blob_store import BlobStore, InMemoryBlobStore
from seller_service.services._shared.ports.token_provider import TokenProvider
from seller_service.services.products.dto import UploadLimits
from seller_service.services.tokens.dto import AuthTokenConfig

log = logging.getLogger(__name__)

EXTENSION_KEY = "seller_service.container"


@dataclass(slots=True)
class ServiceContainer:
    """
    Long-lived collaborators shared by every request.

    Services themselves are cheap and built per request from these parts
    (see :mod:`seller_service.api.deps`).
    """

    token_provider: TokenProvider
    token_cfg: AuthTokenConfig
    blob_store: BlobStore
    upload_limits: UploadLimits


def _refresh_secret(app: Flask) -> str:
    secret = app.config.get("JWT_REFRESH_SECRET")
    if secret:
        return str(secret)
    log.warning("JWT_REFRESH_SECRET is not set; refresh tokens are signed with the access secret")
    return str(app.config["JWT_SECRET"])


def build_blob_store(app: Flask) -> BlobStore:
    """
    Select the image store from ``STORAGE_BACKEND``.

    :raises ValueError: Unknown backend, or MinIO selected without credentials.
    """
    backend = str(app.config.get("STORAGE_BACKEND", "minio")).lower()
    bucket = app.config.get("STORAGE_BUCKET", "product-images")
    if backend == "memory":
        return InMemoryBlobStore(base_url=app.config.get("IMAGE_PUBLIC_BASE_URL") or f"memory://{bucket}")
    if backend == "minio":
        endpoint = app.config.get("MINIO_ENDPOINT")
        secure = bool(app.config.get("MINIO_SECURE", True))
        client = build_minio_client(
            endpoint=endpoint,
            access_key=app.config.get("MINIO_ACCESS_KEY"),
            secret_key=app.config.get("MINIO_SECRET_KEY"),
            secure=secure,
        )
        scheme = "https" if secure else "http"
        base_url = app.config.get("IMAGE_PUBLIC_BASE_URL") or f"{scheme}://{endpoint}"
        return MinioBlobStore(client=client, bucket=bucket, public_base_url=base_url)
    raise ValueError(f"Unknown STORAGE_BACKEND '{backend}' (expected 'minio' or 'memory').")


def build_container(app: Flask) -> ServiceContainer:
    provider = PyJWTTokenProvider(
        access_secret=str(app.config["JWT_SECRET"]),
        refresh_secret=_refresh_secret(app),
        algorithm=app.config.get("JWT_ALGORITHM", "HS256"),
    )
    return ServiceContainer(
        token_provider=provider,
        token_cfg=AuthTokenConfig(
            access_expires=timedelta(minutes=int(app.config["ACCESS_TOKEN_EXPIRES_MINUTES"])),
            refresh_expires=timedelta(days=int(app.config["REFRESH_TOKEN_EXPIRES_DAYS"])),
        ),
        blob_store=build_blob_store(app),
        upload_limits=UploadLimits(
            max_files=int(app.config["MAX_UPLOAD_FILES"]),
            max_bytes=int(app.config["MAX_IMAGE_BYTES"]),
        ),
    )


def init_app(app: Flask) -> None:
    app.extensions[EXTENSION_KEY] = build_container(app)


def get_container() -> ServiceContainer:
    """Return the container of the current application."""
    return current_app.extensions[EXTENSION_KEY]
