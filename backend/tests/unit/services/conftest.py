"""Service-layer fixtures wired to real adapters and the test database."""

from __future__ import annotations

import pytest

from seller_service.infra.jwt.pyjwt_token_provider import PyJWTTokenProvider
from seller_service.repositories import RefreshTokenRepository
from seller_service.services.auth.service import AuthService
from seller_service.services.tokens.service import TokenService


@pytest.fixture()
def provider() -> PyJWTTokenProvider:
    return PyJWTTokenProvider(access_secret="svc-access", refresh_secret="svc-refresh")


@pytest.fixture()
def token_service(provider) -> TokenService:
    return TokenService(token_provider=provider)


@pytest.fixture()
def auth(token_service) -> AuthService:
    return AuthService(token_service=token_service)


@pytest.fixture()
def refresh_rows(session) -> RefreshTokenRepository:
    """Direct access to stored refresh tokens for assertions."""
    return RefreshTokenRepository(session=session)
