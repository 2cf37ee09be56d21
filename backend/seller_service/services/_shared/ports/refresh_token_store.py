from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class RefreshTokenView:
    """
    Read-model for a stored refresh token row.

    :ivar id: Row identifier.
    :ivar seller_id: Owner seller id.
    :ivar token: Encoded refresh token, matched verbatim on lookup.
    :ivar expires_at: Absolute expiration (UTC).
    """

    id: int
    seller_id: str
    token: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now


class RefreshTokenStore(Protocol):
    """
    Stateful store for refresh tokens.

    Implementations never commit; the caller's unit of work owns the
    transaction so a signin can delete old rows and insert the new one
    atomically.
    """

    def add_token(self, *, seller_id: str, token: str, expires_at: datetime) -> RefreshTokenView:
        """Insert a new refresh row."""

    def find_for_seller(self, *, seller_id: str, token: str) -> RefreshTokenView | None:
        """Return the row matching both the token string and the seller id."""

    def replace_token(self, row_id: int, *, token: str, expires_at: datetime) -> None:
        """Overwrite ``token`` and ``expires_at`` of an existing row in place."""

    def delete_record(self, row_id: int) -> None:
        """Delete one row by id."""

    def delete_for_seller(self, seller_id: str) -> int:
        """Delete every row of a seller. :returns: Number of rows removed."""

    def delete_matching(self, *, seller_id: str, token: str) -> int:
        """Delete rows matching seller and token. :returns: Rows removed (may be 0)."""
