"""Authenticated product management for the signed-in seller."""

from __future__ import annotations

from flask import Blueprint, request

from seller_service.api.deps import (
    current_seller_id,
    json_response,
    load_json,
    product_service,
    require_auth,
    timing,
)
from seller_service.schemas import (
    MessageSchema,
    ProductCreateSchema,
    ProductSchema,
    ProductUpdateSchema,
    UploadedImagesSchema,
)
from seller_service.services.products.dto import ImageUploadIn, ProductCreateIn, ProductUpdateIn

bp = Blueprint("products", __name__)

create_schema = ProductCreateSchema()
update_schema = ProductUpdateSchema()
product_schema = ProductSchema()
products_schema = ProductSchema(many=True)
uploaded_schema = UploadedImagesSchema()
message_schema = MessageSchema()

UPLOAD_FIELD = "images"


@bp.post("")
@require_auth
@timing
def create_product():
    data = load_json(create_schema)
    product = product_service().create_product(current_seller_id(), ProductCreateIn(**data))
    return json_response({"data": product_schema.dump(product)}, status=201)


@bp.get("")
@require_auth
@timing
def list_products():
    """All of the seller's products, active or not, newest first."""

    products = product_service().list_own(current_seller_id())
    return json_response({"data": products_schema.dump(products)})


@bp.post("/upload-images")
@require_auth
@timing
def upload_images():
    """Store up to the configured number of images and return their URLs."""

    files = [
        ImageUploadIn(
            filename=storage.filename or "",
            content_type=storage.mimetype or "",
            data=storage.read(),
        )
        for storage in request.files.getlist(UPLOAD_FIELD)
    ]
    urls = product_service().upload_images(current_seller_id(), files)
    return json_response({"data": uploaded_schema.dump({"urls": urls})})


@bp.get("/<string:product_id>")
@require_auth
@timing
def get_product(product_id: str):
    product = product_service().get_own(product_id, actor_id=current_seller_id())
    return json_response({"data": product_schema.dump(product)})


@bp.put("/<string:product_id>")
@require_auth
@timing
def update_product(product_id: str):
    data = load_json(update_schema)
    product = product_service().update_product(
        product_id, ProductUpdateIn(**data), actor_id=current_seller_id()
    )
    return json_response({"data": product_schema.dump(product)})


@bp.delete("/<string:product_id>")
@require_auth
@timing
def delete_product(product_id: str):
    product_service().delete_product(product_id, actor_id=current_seller_id())
    return json_response(message_schema.dump({"message": "Product deleted successfully"}))
