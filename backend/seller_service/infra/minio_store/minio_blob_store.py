# seller_service/infra/minio_store/minio_blob_store.py
from __future__ import annotations

import io
import logging

from minio import Minio
from minio.error import MinioException
from urllib3.exceptions import HTTPError

from seller_service.services._shared.errors import StorageError
from seller_service.services._shared.ports.blob_store import BlobStore, StoredBlob

log = logging.getLogger(__name__)

# S3 error responses plus transport failures (retries exhausted, resets)
STORAGE_FAILURES = (MinioException, HTTPError, OSError)


def build_minio_client(
    *,
    endpoint: str | None,
    access_key: str | None,
    secret_key: str | None,
    secure: bool = True,
) -> Minio:
    """
    Create a MinIO/S3 client, failing fast on missing credentials.

    :raises ValueError: When endpoint or credentials are not configured.
    """
    if not endpoint:
        raise ValueError("MINIO_ENDPOINT not configured. Image uploads require object storage.")
    if not access_key or not secret_key:
        raise ValueError("MINIO_ACCESS_KEY / MINIO_SECRET_KEY not configured.")
    return Minio(endpoint=endpoint, access_key=access_key, secret_key=secret_key, secure=secure)


class MinioBlobStore(BlobStore):
    """
    :class:`BlobStore` adapter over the ``minio`` client.

    :param client: Configured :class:`minio.Minio` instance.
    :param bucket: Target bucket; created lazily on first upload.
    :param public_base_url: Prefix used to build object URLs
        (``{public_base_url}/{bucket}/{key}``).
    """

    def __init__(self, *, client: Minio, bucket: str, public_base_url: str) -> None:
        self.client = client
        self.bucket = bucket
        self.public_base_url = public_base_url.rstrip("/")
        self._bucket_ready = False

    def _ensure_bucket(self) -> None:
        if self._bucket_ready:
            return
        if not self.client.bucket_exists(self.bucket):
            self.client.make_bucket(self.bucket)
            log.info("Created storage bucket %s", self.bucket)
        self._bucket_ready = True

    def url_for(self, key: str) -> str:
        return f"{self.public_base_url}/{self.bucket}/{key}"

    def put(self, *, key: str, data: bytes, content_type: str) -> StoredBlob:
        try:
            self._ensure_bucket()
            self.client.put_object(
                self.bucket,
                key,
                io.BytesIO(data),
                length=len(data),
                content_type=content_type,
            )
        except STORAGE_FAILURES as exc:
            log.error("MinIO upload failed for %s", key, exc_info=True)
            raise StorageError() from exc
        return StoredBlob(key=key, url=self.url_for(key))

    def delete(self, key: str) -> None:
        try:
            self.client.remove_object(self.bucket, key)
        except STORAGE_FAILURES:
            log.warning("MinIO delete failed for %s", key, exc_info=True)
