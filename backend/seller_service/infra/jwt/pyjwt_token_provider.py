# seller_service/infra/jwt/pyjwt_token_provider.py
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

import jwt

from seller_service.services._shared.errors import TokenExpiredError, TokenInvalidError
from seller_service.services._shared.ports import TokenProvider

SELLER_CLAIM = "sellerId"
TYPE_CLAIM = "type"
ACCESS = "access"
REFRESH = "refresh"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class PyJWTTokenProvider(TokenProvider):
    """
    Adapter for PyJWT with one key per token type.

    :param access_secret: HMAC key for access tokens.
    :param refresh_secret: HMAC key for refresh tokens.
    :param algorithm: JWS algorithm (``HS256`` by default).
    :param clock: Time source, overridable in tests.

    Every token carries a random ``jti`` so two tokens minted for the same
    seller within the same second are still distinct strings. The ``type``
    claim is checked on decode, so a refresh token is rejected as an access
    token even when both secrets are the same.
    """

    access_secret: str
    refresh_secret: str
    algorithm: str = "HS256"
    clock: Callable[[], datetime] = field(default=_utcnow)

    def now(self) -> datetime:
        return self.clock()

    # ----------------------------- encode ------------------------------------

    def _encode(self, *, seller_id: str, expires_delta: timedelta, secret: str, ttype: str) -> str:
        issued = self.now()
        payload: dict[str, Any] = {
            SELLER_CLAIM: str(seller_id),
            TYPE_CLAIM: ttype,
            "jti": uuid4().hex,
            "iat": issued,
            "exp": issued + expires_delta,
        }
        return jwt.encode(payload, secret, algorithm=self.algorithm)

    def create_access_token(self, *, seller_id: str, expires_delta: timedelta) -> str:
        return self._encode(
            seller_id=seller_id, expires_delta=expires_delta, secret=self.access_secret, ttype=ACCESS
        )

    def create_refresh_token(self, *, seller_id: str, expires_delta: timedelta) -> str:
        return self._encode(
            seller_id=seller_id, expires_delta=expires_delta, secret=self.refresh_secret, ttype=REFRESH
        )

    # ----------------------------- decode ------------------------------------

    def _decode(self, token: str, *, secret: str, ttype: str) -> dict[str, Any]:
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except jwt.InvalidTokenError as exc:
            raise TokenInvalidError() from exc

        if payload.get(TYPE_CLAIM) != ttype:
            raise TokenInvalidError(f"Expected a {ttype} token")
        seller_id = payload.get(SELLER_CLAIM)
        if not isinstance(seller_id, str) or not seller_id:
            raise TokenInvalidError("Token is missing the seller claim")
        return payload

    def decode_access_token(self, token: str) -> dict[str, Any]:
        return self._decode(token, secret=self.access_secret, ttype=ACCESS)

    def decode_refresh_token(self, token: str) -> dict[str, Any]:
        return self._decode(token, secret=self.refresh_secret, ttype=REFRESH)
