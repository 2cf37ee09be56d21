"""Anonymous catalog browsing. Only active products are ever returned."""

from __future__ import annotations

from flask import Blueprint, request

from seller_service.api.deps import catalog_service, json_response, timing
from seller_service.schemas import CatalogQuerySchema, ProductSchema

bp = Blueprint("public", __name__)

query_schema = CatalogQuerySchema()
product_schema = ProductSchema()
products_schema = ProductSchema(many=True)


@bp.get("/products")
@timing
def list_products():
    """Active products, optionally narrowed by ``category`` prefix and ``subcategory``."""

    args = query_schema.load(request.args)
    products = catalog_service().list_active(
        category=args["category"], subcategory=args["subcategory"]
    )
    return json_response({"data": products_schema.dump(products)})


@bp.get("/products/active")
@timing
def list_active_products():
    products = catalog_service().list_active()
    return json_response({"data": products_schema.dump(products)})


@bp.get("/products/category/<path:category>")
@timing
def list_by_category(category: str):
    """``/category/<category>`` or ``/category/<category>/<subcategory>``."""

    main, _, sub = category.partition("/")
    products = catalog_service().list_active(category=main, subcategory=sub or None)
    return json_response({"data": products_schema.dump(products)})


@bp.get("/products/<string:product_id>")
@timing
def get_product(product_id: str):
    product = catalog_service().get_active(product_id)
    return json_response({"data": product_schema.dump(product)})
