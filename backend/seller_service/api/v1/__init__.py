"""Version 1 routes: seller auth, product management and the public catalog."""

from __future__ import annotations

from flask import Blueprint

API_VERSION = "v1"

from .auth import bp as auth_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .products import bp as products_bp  # noqa: E402
from .public import bp as public_bp  # noqa: E402

# (blueprint, prefix below /api/v1)
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),
    (auth_bp, ""),
    (products_bp, "/products"),
    (public_bp, "/public"),
]
