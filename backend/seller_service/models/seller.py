"""Seller account model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates
from werkzeug.security import check_password_hash, generate_password_hash

from seller_service.core.extensions import db

from .base import ReprMixin, TimestampMixin, UUIDPKMixin

if TYPE_CHECKING:
    from .product import Product
    from .refresh_token import RefreshToken


class Seller(UUIDPKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Seller identity and shop profile.

    Fields
    ------
    phone : str
        Login identifier. Unique, stored trimmed.
    password_hash : str
        Adaptive salted hash (write-only setter via ``password``).
    shop_name, owner_name, address, city, state, pincode : str | None
        Shop profile, filled through the details endpoint after signup.
    open_time, close_time : str | None
        Opening hours as free-form ``HH:MM`` strings.
    categories : list[str]
        Categories the shop sells in.
    """

    __tablename__ = "sellers"

    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    shop_name: Mapped[str | None] = mapped_column(String(120), nullable=True)
    owner_name: Mapped[str | None] = mapped_column(String(120), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(80), nullable=True)
    state: Mapped[str | None] = mapped_column(String(80), nullable=True)
    pincode: Mapped[str | None] = mapped_column(String(12), nullable=True)
    open_time: Mapped[str | None] = mapped_column(String(10), nullable=True)
    close_time: Mapped[str | None] = mapped_column(String(10), nullable=True)
    categories: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    products: Mapped[list[Product]] = relationship(
        back_populates="seller", cascade="all, delete-orphan", passive_deletes=True
    )
    refresh_tokens: Mapped[list[RefreshToken]] = relationship(
        back_populates="seller", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (UniqueConstraint("phone", name="uq_sellers_phone"),)

    # -------------------- Password API --------------------
    @property
    def password(self) -> Any:  # pragma: no cover - explicit write-only contract
        """
        Disallow reading passwords.

        :raises AttributeError: Always, to ensure password is write-only.
        """
        raise AttributeError("Password is write-only.")

    @password.setter
    def password(self, raw: str) -> None:
        if not isinstance(raw, str) or not raw:
            raise ValueError("Password must be a non-empty string.")
        self.password_hash = generate_password_hash(raw)

    def verify_password(self, raw: str) -> bool:
        """
        Verify a password against the stored hash.

        :param raw: Plain text password candidate.
        :type raw: str
        :returns: ``True`` if it matches; otherwise ``False``.
        :rtype: bool
        """
        if not self.password_hash or not raw:
            return False
        return bool(check_password_hash(self.password_hash, raw))

    # -------------------- Validators --------------------
    @validates("phone")
    def _normalize_phone(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Phone is required.")
        return value.strip()
