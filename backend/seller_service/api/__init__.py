"""HTTP surface: versioned blueprints mounted under ``API_BASE_PREFIX``."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask


def join_prefix(*segments: str) -> str:
    """``join_prefix("/api/", "v1", "")`` -> ``"/api/v1"``."""
    parts = [s.strip("/") for s in segments if s.strip("/")]
    return "/" + "/".join(parts)


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Mount each ``(blueprint, relative_prefix)`` pair below ``base_prefix``."""
    for bp, rel_prefix in entries:
        app.register_blueprint(bp, url_prefix=join_prefix(base_prefix, rel_prefix))


def init_app(app: Flask) -> None:
    from seller_service.api.v1 import API_VERSION, REGISTRY

    base = join_prefix(app.config.get("API_BASE_PREFIX", "/api"), API_VERSION)
    register_blueprint_group(app, base_prefix=base, entries=REGISTRY)


__all__ = ["init_app", "join_prefix", "register_blueprint_group"]
