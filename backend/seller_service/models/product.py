"""Product listing model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import JSON, Boolean, CheckConstraint, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from seller_service.core.extensions import db

from .base import ReprMixin, TimestampMixin, UUIDPKMixin

if TYPE_CHECKING:
    from .seller import Seller

SIZES = ("XS", "S", "M", "L", "XL")

# Largest value a Numeric(10, 2) column holds
MAX_PRICE = 99_999_999.99


def default_size_quantities() -> dict[str, int]:
    return {size: 0 for size in SIZES}


class Product(UUIDPKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    A seller's product listing.

    Fields
    ------
    seller_id : str
        Owning seller; only that seller may mutate the row.
    mrp_price : float
        Maximum retail price.
    selling_price : float
        Actual price, never above ``mrp_price``.
    images : list[str]
        Public URLs returned by the image upload endpoint.
    size_quantities : dict[str, int]
        Stock per size (``XS`` .. ``XL``).
    is_active : bool
        Inactive products are hidden from the public catalog.
    """

    __tablename__ = "products"

    seller_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("sellers.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    mrp_price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    selling_price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    category: Mapped[str | None] = mapped_column(String(120), nullable=True)
    subcategory: Mapped[str | None] = mapped_column(String(120), nullable=True)
    size_quantities: Mapped[dict[str, int]] = mapped_column(
        JSON, nullable=False, default=default_size_quantities
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    seller: Mapped[Seller] = relationship(back_populates="products")

    __table_args__ = (
        CheckConstraint("selling_price <= mrp_price", name="selling_le_mrp"),
        CheckConstraint("mrp_price >= 0", name="mrp_non_negative"),
        CheckConstraint("selling_price >= 0", name="selling_non_negative"),
        Index("ix_products_seller_id", "seller_id"),
        Index("ix_products_active_category", "is_active", "category"),
    )
