"""Repository package exposing persistence-layer access for all domain models."""

from __future__ import annotations

from seller_service.repositories.base import BaseRepository, apply_sorting, parse_sort_tokens
from seller_service.repositories.product import ProductRepository
from seller_service.repositories.refresh_token import RefreshTokenRepository
from seller_service.repositories.seller import SellerRepository

__all__ = [
    # Base
    "BaseRepository",
    "apply_sorting",
    "parse_sort_tokens",
    # Domain
    "ProductRepository",
    "RefreshTokenRepository",
    "SellerRepository",
]
