"""
DTOs for SellerService.

DTOs isolate the service layer from ORM models so that callers never see
``password_hash``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from seller_service.models.seller import Seller

PROFILE_FIELDS = (
    "shop_name",
    "owner_name",
    "address",
    "city",
    "state",
    "pincode",
    "open_time",
    "close_time",
    "categories",
)


@dataclass(frozen=True, slots=True)
class SellerDetailsIn:
    """
    Partial profile update; ``None`` means "leave unchanged".

    :param categories: Replacement list of shop categories.
    :type categories: list[str] | None
    """

    shop_name: str | None = None
    owner_name: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    pincode: str | None = None
    open_time: str | None = None
    close_time: str | None = None
    categories: list[str] | None = None

    def provided(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in PROFILE_FIELDS if getattr(self, name) is not None}


@dataclass(frozen=True, slots=True)
class SellerOut:
    """
    Public view of a seller (never includes credentials).
    """

    id: str
    phone: str
    shop_name: str | None
    owner_name: str | None
    address: str | None
    city: str | None
    state: str | None
    pincode: str | None
    open_time: str | None
    close_time: str | None
    categories: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_model(cls, seller: Seller) -> SellerOut:
        return cls(
            id=seller.id,
            phone=seller.phone,
            shop_name=seller.shop_name,
            owner_name=seller.owner_name,
            address=seller.address,
            city=seller.city,
            state=seller.state,
            pincode=seller.pincode,
            open_time=seller.open_time,
            close_time=seller.close_time,
            categories=list(seller.categories or []),
            created_at=seller.created_at,
            updated_at=seller.updated_at,
        )
