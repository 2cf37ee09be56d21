"""Seller repository for persistence and lookup utilities."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from seller_service.models.seller import Seller
from seller_service.repositories.base import BaseRepository


class SellerRepository(BaseRepository[Seller]):
    """Persistence-only repository for :class:`Seller`.

    It NEVER handles tokens or sessions, only DB-level seller management.
    """

    model = Seller

    def _sortable_fields(self):
        return {"created_at": Seller.created_at, "shop_name": Seller.shop_name}

    def _filterable_fields(self):
        return {"phone": Seller.phone, "city": Seller.city}

    def _updatable_fields(self):
        """Profile fields a seller may change (never phone or password)."""
        return {
            "shop_name",
            "owner_name",
            "address",
            "city",
            "state",
            "pincode",
            "open_time",
            "close_time",
            "categories",
        }

    def get_by_phone(self, phone: str) -> Seller | None:
        """Fetch a seller by phone number.

        :param phone: Phone number, trimmed before lookup.
        :type phone: str
        :returns: Seller instance or ``None`` when not found.
        :rtype: Seller | None
        """
        stmt = select(Seller).where(Seller.phone == phone.strip())
        return cast(Seller | None, self.session.execute(stmt).scalars().first())

    def exists_by_phone(self, phone: str) -> bool:
        stmt = select(Seller.id).where(Seller.phone == phone.strip())
        return bool(self.session.execute(stmt).first())
