"""Convenience exports for application schemas."""

from __future__ import annotations

from .auth import (
    AuthResponseSchema,
    RefreshTokenSchema,
    SigninSchema,
    SignupSchema,
)
from .common import HealthSchema, MessageSchema, UploadedImagesSchema
from .product import CatalogQuerySchema, ProductCreateSchema, ProductSchema, ProductUpdateSchema
from .seller import SellerDetailsSchema, SellerSchema

__all__ = [
    "AuthResponseSchema",
    "CatalogQuerySchema",
    "HealthSchema",
    "MessageSchema",
    "ProductCreateSchema",
    "ProductSchema",
    "ProductUpdateSchema",
    "RefreshTokenSchema",
    "SellerDetailsSchema",
    "SellerSchema",
    "SigninSchema",
    "SignupSchema",
    "UploadedImagesSchema",
]
