"""Unit tests for ProductService.upload_images."""

from __future__ import annotations

import pytest

from seller_service.services._shared.errors import (
    FileTooLargeError,
    StorageError,
    UnsupportedMediaTypeError,
    ValidationError,
)
from seller_service.services._shared.ports import InMemoryBlobStore
from seller_service.services.products.dto import ImageUploadIn, UploadLimits
from seller_service.services.products.service import ProductService


def _png(name: str = "photo.png", size: int = 16) -> ImageUploadIn:
    return ImageUploadIn(filename=name, content_type="image/png", data=b"\x89" * size)


@pytest.fixture()
def store() -> InMemoryBlobStore:
    return InMemoryBlobStore(base_url="http://cdn.test/bucket")


@pytest.fixture()
def service(store) -> ProductService:
    return ProductService(blob_store=store, limits=UploadLimits(max_files=3, max_bytes=64))


def test_upload_returns_urls_in_input_order(service, store):
    urls = service.upload_images("seller-1", [_png("a.png"), _png("b.jpg")])

    assert len(urls) == 2
    assert all(u.startswith("http://cdn.test/bucket/products/seller-1/") for u in urls)
    assert urls[0].endswith(".png")
    assert urls[1].endswith(".jpg")
    assert len(store.objects) == 2


def test_extension_guessed_from_mime_type(service):
    [url] = service.upload_images("s", [ImageUploadIn(filename="blob", content_type="image/png", data=b"x")])
    assert url.endswith(".png")


def test_keys_are_unique_for_identical_names(service, store):
    service.upload_images("s", [_png("same.png"), _png("same.png")])
    assert len(store.objects) == 2


def test_no_files_rejected(service):
    with pytest.raises(ValidationError) as exc:
        service.upload_images("s", [])
    assert exc.value.message == "No files uploaded"


def test_too_many_files_rejected(service, store):
    with pytest.raises(ValidationError):
        service.upload_images("s", [_png() for _ in range(4)])
    assert store.objects == {}


def test_non_image_rejected_before_any_upload(service, store):
    files = [_png(), ImageUploadIn(filename="notes.txt", content_type="text/plain", data=b"hi")]
    with pytest.raises(UnsupportedMediaTypeError):
        service.upload_images("s", files)
    assert store.objects == {}


def test_oversized_file_rejected(service, store):
    with pytest.raises(FileTooLargeError):
        service.upload_images("s", [_png(size=65)])
    assert store.objects == {}


def test_file_at_limit_accepted(service):
    assert len(service.upload_images("s", [_png(size=64)])) == 1


def test_storage_failure_removes_partial_batch():
    store = InMemoryBlobStore(fail_after=2)
    service = ProductService(blob_store=store, limits=UploadLimits(max_files=3, max_bytes=64))

    with pytest.raises(StorageError):
        service.upload_images("s", [_png(), _png(), _png()])

    assert store.objects == {}


def test_missing_store_is_a_storage_error():
    with pytest.raises(StorageError):
        ProductService().upload_images("s", [_png()])


def test_transport_failure_removes_objects_already_stored():
    from unittest.mock import MagicMock

    from urllib3.exceptions import MaxRetryError

    from seller_service.infra.minio_store.minio_blob_store import MinioBlobStore

    client = MagicMock()
    client.bucket_exists.return_value = True
    client.put_object.side_effect = [None, MaxRetryError(None, "/product-images/k", "connection refused")]
    service = ProductService(
        blob_store=MinioBlobStore(client=client, bucket="product-images", public_base_url="http://cdn.test"),
        limits=UploadLimits(max_files=3, max_bytes=64),
    )

    with pytest.raises(StorageError):
        service.upload_images("seller-1", [_png("a.png"), _png("b.png")])

    assert client.remove_object.call_count == 1
    first_key = client.put_object.call_args_list[0].args[1]
    client.remove_object.assert_called_once_with("product-images", first_key)
