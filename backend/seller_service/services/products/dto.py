"""
DTOs for ProductService and CatalogService.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

from seller_service.models.product import default_size_quantities

if TYPE_CHECKING:
    from seller_service.models.product import Product

UPDATABLE_FIELDS = (
    "name",
    "description",
    "mrp_price",
    "selling_price",
    "images",
    "category",
    "subcategory",
    "size_quantities",
    "is_active",
)


# --------------------------------------------------------------------------- #
# Input DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class ProductCreateIn:
    """
    Input DTO for a new listing.

    :param size_quantities: Stock per size; ``None`` falls back to all sizes at zero.
    :type size_quantities: dict[str, int] | None
    """

    name: str
    mrp_price: float
    selling_price: float
    description: str | None = None
    images: list[str] = field(default_factory=list)
    category: str | None = None
    subcategory: str | None = None
    size_quantities: dict[str, int] | None = None
    is_active: bool = True


@dataclass(frozen=True, slots=True)
class ProductUpdateIn:
    """Partial update; ``None`` means "leave unchanged"."""

    name: str | None = None
    description: str | None = None
    mrp_price: float | None = None
    selling_price: float | None = None
    images: list[str] | None = None
    category: str | None = None
    subcategory: str | None = None
    size_quantities: dict[str, int] | None = None
    is_active: bool | None = None

    def provided(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in UPDATABLE_FIELDS if getattr(self, name) is not None}


@dataclass(frozen=True, slots=True)
class ImageUploadIn:
    """
    One file from a multipart upload.

    :param filename: Client-supplied file name (only its extension is kept).
    :param content_type: Declared MIME type.
    :param data: Raw bytes.
    """

    filename: str
    content_type: str
    data: bytes


@dataclass(frozen=True, slots=True)
class UploadLimits:
    max_files: int = 5
    max_bytes: int = 10 * 1024 * 1024


# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class ProductOut:
    id: str
    seller_id: str
    name: str
    description: str | None
    mrp_price: float
    selling_price: float
    images: list[str]
    category: str | None
    subcategory: str | None
    size_quantities: dict[str, int]
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_model(cls, product: Product) -> ProductOut:
        return cls(
            id=product.id,
            seller_id=product.seller_id,
            name=product.name,
            description=product.description,
            mrp_price=float(product.mrp_price),
            selling_price=float(product.selling_price),
            images=list(product.images or []),
            category=product.category,
            subcategory=product.subcategory,
            size_quantities=dict(product.size_quantities or default_size_quantities()),
            is_active=bool(product.is_active),
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
