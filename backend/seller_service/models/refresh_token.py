"""Persisted refresh tokens (one active row per seller after signin)."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from seller_service.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .seller import Seller


class RefreshToken(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Server-side record of an issued refresh token.

    A refresh token is only honoured while a row with the same token string
    and seller id exists and ``expires_at`` lies in the future.
    """

    __tablename__ = "refresh_tokens"

    token: Mapped[str] = mapped_column(Text, nullable=False)
    seller_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("sellers.id", ondelete="CASCADE"), nullable=False
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    seller: Mapped[Seller] = relationship(back_populates="refresh_tokens")

    __table_args__ = (Index("ix_refresh_tokens_seller_id", "seller_id"),)
