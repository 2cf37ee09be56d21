"""Transaction boundary interface used by services."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from seller_service.repositories import (
        ProductRepository,
        RefreshTokenRepository,
        SellerRepository,
    )


class UnitOfWork(ABC):
    """
    One use case, one transaction.

    The three repositories share the unit's session. Leaving the ``with``
    block on an exception rolls back; implementations decide whether a clean
    exit commits.
    """

    sellers: SellerRepository
    products: ProductRepository
    refresh_tokens: RefreshTokenRepository

    @abstractmethod
    def __enter__(self) -> UnitOfWork: ...

    @abstractmethod
    def __exit__(self, exc_type, exc, tb) -> None: ...

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...
