"""Environment-driven configuration classes, selected by ``APP_ENV``."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

ENV_VAR: Final[str] = "APP_ENV"

DEFAULT_CORS_ORIGINS: Final[str] = "http://localhost:3000,https://www.fastandfab.in"

TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "y", "on"})

load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Read a yes/no flag; anything outside :data:`TRUTHY` counts as false."""
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


def env_int(name: str, default: int) -> int:
    """Read an integer, using ``default`` for blank or non-numeric values."""
    raw = (os.getenv(name) or "").strip()
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


class BaseConfig:
    """
    Settings common to every environment.

    Token settings
    --------------
    ``JWT_SECRET`` signs access tokens and ``JWT_REFRESH_SECRET`` signs
    refresh tokens. A missing refresh secret falls back to the access one
    with a startup warning. Lifetimes default to 15 minutes and 7 days.

    Image storage
    -------------
    ``STORAGE_BACKEND`` is ``"minio"`` (S3-compatible bucket named by
    ``STORAGE_BUCKET``) or ``"memory"``. ``IMAGE_PUBLIC_BASE_URL`` overrides
    the URL prefix returned to clients. ``MAX_UPLOAD_FILES`` and
    ``MAX_IMAGE_BYTES`` bound one upload request.
    """

    API_BASE_PREFIX = "/api"

    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")
    JWT_SECRET = os.getenv("JWT_SECRET", "CHANGE_ME_JWT")
    JWT_REFRESH_SECRET = os.getenv("JWT_REFRESH_SECRET") or None
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRES_MINUTES = env_int("ACCESS_TOKEN_EXPIRES_MINUTES", 15)
    REFRESH_TOKEN_EXPIRES_DAYS = env_int("REFRESH_TOKEN_EXPIRES_DAYS", 7)

    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///./dev.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)

    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "minio").strip().lower()
    STORAGE_BUCKET = os.getenv("STORAGE_BUCKET", "product-images")
    MINIO_ENDPOINT = os.getenv("MINIO_ENDPOINT")
    MINIO_ACCESS_KEY = os.getenv("MINIO_ACCESS_KEY")
    MINIO_SECRET_KEY = os.getenv("MINIO_SECRET_KEY")
    MINIO_SECURE = env_bool("MINIO_SECURE", True)
    IMAGE_PUBLIC_BASE_URL = os.getenv("IMAGE_PUBLIC_BASE_URL") or None

    MAX_UPLOAD_FILES = env_int("MAX_UPLOAD_FILES", 5)
    MAX_IMAGE_BYTES = env_int("MAX_IMAGE_BYTES", 10 * 1024 * 1024)
    # Whole multipart body: a full batch plus 1 MiB of form fields
    MAX_CONTENT_LENGTH = MAX_UPLOAD_FILES * MAX_IMAGE_BYTES + 1024 * 1024

    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    USE_PROXYFIX = env_bool("USE_PROXYFIX", True)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    CORS_MAX_AGE = env_int("CORS_MAX_AGE", 600)

    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Local runs: debug on, images kept in process memory unless overridden."""

    DEBUG = env_bool("FLASK_DEBUG", True)
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").strip().lower()


class TestingConfig(BaseConfig):
    """Fixed secrets, in-memory images and SQLite unless ``TEST_DATABASE_URL`` is set."""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")
    SQLALCHEMY_ECHO = False
    STORAGE_BACKEND = "memory"
    JWT_SECRET = "test-access-secret"
    JWT_REFRESH_SECRET = "test-refresh-secret"


class ProductionConfig(BaseConfig):
    SQLALCHEMY_ECHO = False


CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Config class named by ``APP_ENV``; unknown or unset means development."""
    return CONFIG_MAP.get(os.getenv(ENV_VAR, "development").strip().lower(), DevelopmentConfig)
