"""Unit tests for TokenService."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from seller_service.infra.jwt.pyjwt_token_provider import PyJWTTokenProvider
from seller_service.services._shared.errors import TokenInvalidError
from seller_service.services.tokens import AuthTokenConfig, TokenService


def test_default_lifetimes():
    cfg = AuthTokenConfig()
    assert cfg.access_expires == timedelta(minutes=15)
    assert cfg.refresh_expires == timedelta(days=7)


def test_issue_pair_sets_refresh_expiry_from_clock():
    fixed = datetime.now(timezone.utc).replace(microsecond=0)
    provider = PyJWTTokenProvider(access_secret="a", refresh_secret="r", clock=lambda: fixed)
    service = TokenService(token_provider=provider)

    pair = service.issue_pair("seller-1")

    assert pair.refresh_expires_at == fixed + timedelta(days=7)
    assert pair.access_token != pair.refresh_token
    assert service.verify_access_token(pair.access_token) == "seller-1"
    assert service.verify_refresh_token(pair.refresh_token) == "seller-1"


def test_custom_lifetimes_are_honoured(provider):
    service = TokenService(
        token_provider=provider,
        token_cfg=AuthTokenConfig(access_expires=timedelta(minutes=1), refresh_expires=timedelta(hours=1)),
    )
    payload = provider.decode_access_token(service.issue_pair("s").access_token)
    assert payload["exp"] - payload["iat"] == 60


def test_verify_access_rejects_refresh_token(token_service):
    pair = token_service.issue_pair("seller-1")
    with pytest.raises(TokenInvalidError):
        token_service.verify_access_token(pair.refresh_token)


def test_verify_access_rejects_refresh_token_with_shared_secret():
    service = TokenService(token_provider=PyJWTTokenProvider(access_secret="same", refresh_secret="same"))
    pair = service.issue_pair("seller-1")

    assert service.verify_access_token(pair.access_token) == "seller-1"
    with pytest.raises(TokenInvalidError):
        service.verify_access_token(pair.refresh_token)
    with pytest.raises(TokenInvalidError):
        service.verify_refresh_token(pair.access_token)


def test_persist_refresh_token(token_service, seller, refresh_rows, session):
    pair = token_service.issue_pair(seller.id)
    view = token_service.persist_refresh_token(refresh_rows, seller.id, pair)
    session.commit()

    assert view.token == pair.refresh_token
    assert view.expires_at == pair.refresh_expires_at


def test_revoke_returns_removed_count(token_service, seller, refresh_rows, session):
    pair = token_service.issue_pair(seller.id)
    token_service.persist_refresh_token(refresh_rows, seller.id, pair)
    session.commit()

    assert token_service.revoke(seller.id, pair.refresh_token) == 1
    assert token_service.revoke(seller.id, pair.refresh_token) == 0
