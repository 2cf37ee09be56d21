from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Protocol


class TokenProvider(Protocol):
    """
    Port for signing and verifying bearer credentials.

    Access and refresh tokens are signed with independent keys so that a
    leaked access-token key cannot mint refresh tokens.

    Implementations raise :class:`~seller_service.services._shared.errors.TokenExpiredError`
    or :class:`~seller_service.services._shared.errors.TokenInvalidError` from
    the ``decode_*`` methods; they never return partially verified claims.
    """

    def create_access_token(self, *, seller_id: str, expires_delta: timedelta) -> str: ...

    def create_refresh_token(self, *, seller_id: str, expires_delta: timedelta) -> str: ...

    def decode_access_token(self, token: str) -> dict[str, Any]: ...

    def decode_refresh_token(self, token: str) -> dict[str, Any]: ...

    def now(self) -> datetime: ...
