"""Reverse-proxy awareness for deployments behind a load balancer."""

from __future__ import annotations

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix


def init_app(app: Flask) -> None:
    """Wrap the WSGI app in :class:`ProxyFix` unless ``USE_PROXYFIX`` is off.

    One hop is trusted for ``X-Forwarded-For``/``-Proto``/``-Host`` so that
    generated URLs and logged client addresses reflect the original request.
    """
    if not app.config.get("USE_PROXYFIX", True):
        return
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)
