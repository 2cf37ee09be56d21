"""Unit tests for dependency wiring in the service container."""

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from seller_service.core.container import _refresh_secret, build_blob_store, build_container
from seller_service.infra.minio_store.minio_blob_store import MinioBlobStore
from seller_service.services._shared.ports import InMemoryBlobStore


def _fake_app(**config):
    return SimpleNamespace(config=config)


def test_refresh_secret_falls_back_with_warning(caplog):
    app = _fake_app(JWT_SECRET="access", JWT_REFRESH_SECRET=None)
    with caplog.at_level(logging.WARNING):
        assert _refresh_secret(app) == "access"
    assert "JWT_REFRESH_SECRET is not set" in caplog.text


def test_refresh_secret_used_when_configured():
    assert _refresh_secret(_fake_app(JWT_SECRET="a", JWT_REFRESH_SECRET="r")) == "r"


def test_memory_backend():
    store = build_blob_store(_fake_app(STORAGE_BACKEND="memory", STORAGE_BUCKET="imgs"))
    assert isinstance(store, InMemoryBlobStore)
    assert store.base_url == "memory://imgs"


def test_minio_backend():
    store = build_blob_store(
        _fake_app(
            STORAGE_BACKEND="minio",
            STORAGE_BUCKET="imgs",
            MINIO_ENDPOINT="minio:9000",
            MINIO_ACCESS_KEY="key",
            MINIO_SECRET_KEY="secret",
            MINIO_SECURE=False,
        )
    )
    assert isinstance(store, MinioBlobStore)
    assert store.url_for("a.png") == "http://minio:9000/imgs/a.png"


def test_unknown_backend_rejected():
    with pytest.raises(ValueError):
        build_blob_store(_fake_app(STORAGE_BACKEND="ftp"))


def test_container_uses_configured_lifetimes(app):
    container = build_container(app)
    assert container.token_cfg.access_expires.total_seconds() == 15 * 60
    assert container.token_cfg.refresh_expires.days == 7
    assert container.upload_limits.max_files == 5
