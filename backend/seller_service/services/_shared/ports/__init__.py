"""
seller_service.services._shared.ports
=====================================

Collection of *ports* (hexagonal interfaces) that define the contracts for
token signing, refresh-token persistence and image storage.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`: abstraction for JWT creation and decoding.

- :mod:`refresh_token_store`:
    Defines :class:`~.RefreshTokenStore` and
    :class:`~.RefreshTokenView`.

- :mod:`blob_store`:
    Defines :class:`~.BlobStore` plus the :class:`~.InMemoryBlobStore` double.

Concrete adapters live under ``seller_service.infra`` (PyJWT, MinIO) and
``seller_service.repositories`` (SQL-backed refresh tokens).
"""

from __future__ import annotations

from .blob_store import BlobStore, InMemoryBlobStore, StoredBlob
from .refresh_token_store import RefreshTokenStore, RefreshTokenView
from .token_provider import TokenProvider

__all__ = [
    "TokenProvider",
    "RefreshTokenStore",
    "RefreshTokenView",
    "BlobStore",
    "InMemoryBlobStore",
    "StoredBlob",
]
