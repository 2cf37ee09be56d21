from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Protocol

from seller_service.services._shared.errors import StorageError


@dataclass(frozen=True)
class StoredBlob:
    """
    Result of a successful upload.

    :ivar key: Object key inside the bucket.
    :ivar url: Publicly reachable URL of the object.
    """

    key: str
    url: str


class BlobStore(Protocol):
    """
    Object storage for product images.

    Implementations raise :class:`StorageError` on any backend failure and
    never leak client-library exceptions to the service layer.
    """

    def put(self, *, key: str, data: bytes, content_type: str) -> StoredBlob:
        """Store ``data`` under ``key`` and return its public URL."""

    def delete(self, key: str) -> None:
        """Remove an object; missing keys are ignored."""


class InMemoryBlobStore(BlobStore):
    """
    Process-local blob store used in development and tests.

    :param base_url: Prefix for generated URLs.
    :param fail_after: When set, the store raises :class:`StorageError` once
        this many objects have been written (simulates a partial batch failure).
    """

    def __init__(self, *, base_url: str = "memory://product-images", fail_after: int | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.fail_after = fail_after
        self.objects: dict[str, tuple[bytes, str]] = {}
        self._writes = 0
        self._lock = threading.Lock()

    def put(self, *, key: str, data: bytes, content_type: str) -> StoredBlob:
        with self._lock:
            if self.fail_after is not None and self._writes >= self.fail_after:
                raise StorageError()
            self.objects[key] = (data, content_type)
            self._writes += 1
        return StoredBlob(key=key, url=f"{self.base_url}/{key}")

    def delete(self, key: str) -> None:
        with self._lock:
            self.objects.pop(key, None)
