"""Product repository: seller-scoped and public catalog queries."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, select

from seller_service.models.product import Product
from seller_service.repositories.base import BaseRepository, apply_sorting

NEWEST_FIRST = ("-created_at",)


class ProductRepository(BaseRepository[Product]):
    """Persistence-only repository for :class:`Product`.

    Ownership is enforced by services; public queries here always filter on
    ``is_active``.
    """

    model = Product

    def _sortable_fields(self):
        return {
            "created_at": Product.created_at,
            "name": Product.name,
            "selling_price": Product.selling_price,
        }

    def _filterable_fields(self):
        return {
            "seller_id": Product.seller_id,
            "is_active": Product.is_active,
            "subcategory": Product.subcategory,
        }

    def _updatable_fields(self):
        return {
            "name",
            "description",
            "mrp_price",
            "selling_price",
            "images",
            "category",
            "subcategory",
            "size_quantities",
            "is_active",
        }

    # ---------------------------- Seller scope ----------------------------

    def list_by_seller(self, seller_id: str) -> list[Product]:
        """Return every product of ``seller_id`` (active or not), newest first."""
        return self.list(filters={"seller_id": seller_id}, sort=NEWEST_FIRST)

    # ---------------------------- Public scope ----------------------------

    def list_active(
        self,
        *,
        category: str | None = None,
        subcategory: str | None = None,
    ) -> list[Product]:
        """Return active products, newest first.

        :param category: Optional prefix matched against ``category``.
        :type category: str | None
        :param subcategory: Optional exact ``subcategory`` filter.
        :type subcategory: str | None
        :returns: Matching active products.
        :rtype: list[Product]
        """
        stmt: Select[Any] = select(Product).where(Product.is_active.is_(True))
        if category:
            stmt = stmt.where(Product.category.startswith(category, autoescape=True))
        if subcategory:
            stmt = stmt.where(Product.subcategory == subcategory)
        stmt = apply_sorting(stmt, self._sortable_fields(), NEWEST_FIRST, pk_attr=Product.id)
        return list(self.session.execute(stmt).scalars().all())

    def get_active(self, product_id: str) -> Product | None:
        stmt = select(Product).where(Product.id == product_id, Product.is_active.is_(True))
        return self.session.execute(stmt).scalars().first()
