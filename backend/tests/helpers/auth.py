"""Token helpers for HTTP tests."""

from __future__ import annotations

from datetime import timedelta

from seller_service.core.container import get_container


def issue_access_token(seller_id: str, minutes: int = 15) -> str:
    """Mint an access token with the application's own provider (needs an app context)."""
    provider = get_container().token_provider
    return provider.create_access_token(seller_id=seller_id, expires_delta=timedelta(minutes=minutes))
