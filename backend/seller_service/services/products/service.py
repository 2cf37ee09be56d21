# seller_service/services/products/service.py
from __future__ import annotations

import logging
import mimetypes
import os
from collections.abc import Sequence
from uuid import uuid4

from seller_service.models.product import Product, default_size_quantities
from seller_service.services._shared.base import BaseService
from seller_service.services._shared.errors import (
    FileTooLargeError,
    NotFoundError,
    StorageError,
    UnsupportedMediaTypeError,
    ValidationError,
)
from seller_service.services._shared.ports.blob_store import BlobStore
from seller_service.services.products.dto import (
    ImageUploadIn,
    ProductCreateIn,
    ProductOut,
    ProductUpdateIn,
    UploadLimits,
)

log = logging.getLogger(__name__)

PRICE_RULE_MESSAGE = "Selling price cannot be greater than MRP"


def ensure_price_rule(mrp_price: float, selling_price: float) -> None:
    """
    :raises ValidationError: When ``selling_price`` exceeds ``mrp_price``.
    """
    if selling_price > mrp_price:
        raise ValidationError(PRICE_RULE_MESSAGE)


class ProductService(BaseService):
    """
    Seller-scoped product management.

    Every read or mutation of a single product checks ownership after the
    row is loaded and before anything is changed.
    """

    def __init__(
        self,
        *,
        blob_store: BlobStore | None = None,
        limits: UploadLimits | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.blob_store = blob_store
        self.limits = limits or UploadLimits()

    # ------------------------------------------------------------------ #
    # CRUD
    # ------------------------------------------------------------------ #

    def create_product(self, seller_id: str, dto: ProductCreateIn) -> ProductOut:
        ensure_price_rule(dto.mrp_price, dto.selling_price)

        with self.rw_uow() as uow:
            product = Product(
                seller_id=seller_id,
                name=dto.name,
                description=dto.description,
                mrp_price=dto.mrp_price,
                selling_price=dto.selling_price,
                images=list(dto.images),
                category=dto.category,
                subcategory=dto.subcategory,
                size_quantities=dict(dto.size_quantities or default_size_quantities()),
                is_active=dto.is_active,
            )
            uow.products.add(product)
            out = ProductOut.from_model(product)

        log.info("Product created", extra={"seller_id": seller_id, "product_id": out.id})
        return out

    def list_own(self, seller_id: str) -> list[ProductOut]:
        """Every product of the seller, active or not, newest first."""
        with self.ro_uow() as uow:
            return [ProductOut.from_model(p) for p in uow.products.list_by_seller(seller_id)]

    def get_own(self, product_id: str, *, actor_id: str | None) -> ProductOut:
        with self.ro_uow() as uow:
            product = uow.products.get(product_id)
            if product is None:
                raise NotFoundError("Product", product_id)
            self.ensure_owner(actor_id, product.seller_id, msg="You can only view your own products")
            return ProductOut.from_model(product)

    def update_product(
        self, product_id: str, dto: ProductUpdateIn, *, actor_id: str | None
    ) -> ProductOut:
        """
        Apply a partial update.

        The price rule is checked against the values the row would hold
        after the update, so lowering only the MRP below the current selling
        price is rejected too.

        :raises NotFoundError: Unknown product.
        :raises AuthorizationError: Product belongs to another seller.
        :raises ValidationError: Resulting selling price exceeds MRP.
        """
        with self.rw_uow() as uow:
            product = uow.products.get(product_id)
            if product is None:
                raise NotFoundError("Product", product_id)
            self.ensure_owner(actor_id, product.seller_id, msg="You can only update your own products")

            changes = dto.provided()
            ensure_price_rule(
                float(changes.get("mrp_price", product.mrp_price)),
                float(changes.get("selling_price", product.selling_price)),
            )
            uow.products.assign_updates(product, changes)
            out = ProductOut.from_model(product)

        log.info("Product updated", extra={"seller_id": actor_id, "product_id": product_id})
        return out

    def delete_product(self, product_id: str, *, actor_id: str | None) -> None:
        with self.rw_uow() as uow:
            product = uow.products.get(product_id)
            if product is None:
                raise NotFoundError("Product", product_id)
            self.ensure_owner(actor_id, product.seller_id, msg="You can only delete your own products")
            uow.products.delete(product)

        log.info("Product deleted", extra={"seller_id": actor_id, "product_id": product_id})

    # ------------------------------------------------------------------ #
    # Images
    # ------------------------------------------------------------------ #

    def _validate_files(self, files: Sequence[ImageUploadIn]) -> None:
        if not files:
            raise ValidationError("No files uploaded")
        if len(files) > self.limits.max_files:
            raise ValidationError(f"At most {self.limits.max_files} images can be uploaded at once")
        for upload in files:
            if not (upload.content_type or "").lower().startswith("image/"):
                raise UnsupportedMediaTypeError(f"{upload.filename or 'file'} is not an image")
            if len(upload.data) > self.limits.max_bytes:
                raise FileTooLargeError(f"{upload.filename or 'file'} exceeds the size limit")

    @staticmethod
    def _object_key(seller_id: str, upload: ImageUploadIn) -> str:
        ext = os.path.splitext(upload.filename or "")[1].lower()
        if not ext:
            ext = mimetypes.guess_extension(upload.content_type) or ""
        return f"products/{seller_id}/{uuid4().hex}{ext}"

    def upload_images(self, seller_id: str, files: Sequence[ImageUploadIn]) -> list[str]:
        """
        Store a batch of images and return their public URLs in input order.

        The whole batch is validated before the first upload. If storage
        fails midway, objects already written by this call are removed.

        :raises ValidationError: No files, or more than the configured maximum.
        :raises UnsupportedMediaTypeError: A file is not ``image/*``.
        :raises FileTooLargeError: A file exceeds the size limit.
        :raises StorageError: The object store failed.
        """
        if self.blob_store is None:
            raise StorageError("Image storage is not configured")
        self._validate_files(files)

        stored: list[str] = []
        urls: list[str] = []
        try:
            for upload in files:
                blob = self.blob_store.put(
                    key=self._object_key(seller_id, upload),
                    data=upload.data,
                    content_type=upload.content_type,
                )
                stored.append(blob.key)
                urls.append(blob.url)
        except StorageError:
            for key in stored:
                self.blob_store.delete(key)
            log.error("Image upload failed", extra={"seller_id": seller_id, "count": len(stored)})
            raise

        log.info("Images uploaded", extra={"seller_id": seller_id, "count": len(urls)})
        return urls
