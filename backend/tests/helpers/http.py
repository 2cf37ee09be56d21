"""HTTP helper utilities for tests."""

from __future__ import annotations

from typing import Any


def bearer(token: str) -> dict[str, str]:
    """Return an ``Authorization`` header carrying ``token``."""
    return {"Authorization": f"Bearer {token}"}


def signup(client, phone: str, password: str = "secret123") -> dict[str, Any]:
    """Register a seller through the API and return the ``data`` payload."""
    resp = client.post("/api/v1/signup", json={"phone": phone, "password": password})
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()["data"]


def assert_problem(resp, status: int, code: str) -> dict[str, Any]:
    """Check an RFC 7807 error response and return its body."""
    assert resp.status_code == status, resp.get_json()
    assert resp.mimetype == "application/problem+json"
    body = resp.get_json()
    assert body["status"] == status
    assert body["code"] == code
    return body
