# seller_service/services/tokens/service.py
from __future__ import annotations

import logging

from seller_service.services._shared.base import BaseService
from seller_service.services._shared.dto import TokenPairOut
from seller_service.services._shared.errors import (
    RefreshTokenExpiredError,
    RefreshTokenNotFoundError,
)
from seller_service.services._shared.ports.refresh_token_store import (
    RefreshTokenStore,
    RefreshTokenView,
)
from seller_service.services._shared.ports.token_provider import TokenProvider
from seller_service.services.tokens.dto import AuthTokenConfig, RotationOut

log = logging.getLogger(__name__)


class TokenService(BaseService):
    """
    Access/refresh token lifecycle.

    Signing and verification are delegated to a :class:`TokenProvider`;
    refresh rows are read and written through the unit of work's
    ``refresh_tokens`` store so they share the caller's transaction.
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        token_cfg: AuthTokenConfig | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.provider = token_provider
        self.cfg = token_cfg or AuthTokenConfig()

    # ------------------------------------------------------------------ #
    # Issue / verify
    # ------------------------------------------------------------------ #

    def issue_pair(self, seller_id: str) -> TokenPairOut:
        """
        Mint an access token and a refresh token for ``seller_id``.

        No store side effect; callers persist the refresh token themselves.
        """
        now = self.provider.now()
        access = self.provider.create_access_token(
            seller_id=seller_id, expires_delta=self.cfg.access_expires
        )
        refresh = self.provider.create_refresh_token(
            seller_id=seller_id, expires_delta=self.cfg.refresh_expires
        )
        return TokenPairOut(
            access_token=access,
            refresh_token=refresh,
            refresh_expires_at=now + self.cfg.refresh_expires,
        )

    def verify_access_token(self, token: str) -> str:
        """
        :returns: Seller id carried by the token.
        :raises TokenExpiredError: Past ``exp``.
        :raises TokenInvalidError: Bad signature, malformed, or no seller claim.
        """
        return str(self.provider.decode_access_token(token)["sellerId"])

    def verify_refresh_token(self, token: str) -> str:
        return str(self.provider.decode_refresh_token(token)["sellerId"])

    # ------------------------------------------------------------------ #
    # Persistence
    # ------------------------------------------------------------------ #

    def persist_refresh_token(
        self, store: RefreshTokenStore, seller_id: str, pair: TokenPairOut
    ) -> RefreshTokenView:
        """Insert the refresh row inside the caller's unit of work."""
        return store.add_token(
            seller_id=seller_id,
            token=pair.refresh_token,
            expires_at=pair.refresh_expires_at,
        )

    def rotate_refresh_token(self, old_token: str) -> RotationOut:
        """
        Exchange a stored refresh token for a new pair.

        The row matching both the token string and its seller id is updated
        in place. An expired row is deleted and that delete is committed
        before :class:`RefreshTokenExpiredError` is raised.

        :raises TokenExpiredError: The JWT itself is past ``exp``.
        :raises TokenInvalidError: The JWT does not verify.
        :raises RefreshTokenNotFoundError: No row matches (already rotated or logged out).
        :raises RefreshTokenExpiredError: The row is past ``expires_at``.
        """
        seller_id = self.verify_refresh_token(old_token)

        with self.rw_uow() as uow:
            row = uow.refresh_tokens.find_for_seller(seller_id=seller_id, token=old_token)
            if row is None:
                log.warning("Refresh token not found", extra={"seller_id": seller_id})
                raise RefreshTokenNotFoundError()
            if row.is_expired(self.provider.now()):
                uow.refresh_tokens.delete_record(row.id)
                # Keep the delete even though the call fails
                uow.commit()
                log.info("Expired refresh token removed", extra={"seller_id": seller_id})
                raise RefreshTokenExpiredError()

            pair = self.issue_pair(seller_id)
            uow.refresh_tokens.replace_token(
                row.id, token=pair.refresh_token, expires_at=pair.refresh_expires_at
            )

        log.info("Refresh token rotated", extra={"seller_id": seller_id})
        return RotationOut(seller_id=seller_id, tokens=pair)

    def revoke(self, seller_id: str, token: str) -> int:
        """
        Delete every row matching ``seller_id`` and ``token``.

        :returns: Rows removed; zero is not an error.
        """
        with self.rw_uow() as uow:
            removed = uow.refresh_tokens.delete_matching(seller_id=seller_id, token=token)
        log.info("Refresh token revoked", extra={"seller_id": seller_id, "count": removed})
        return removed
