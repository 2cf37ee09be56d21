"""Product request/response schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, ValidationError, fields, validate, validates_schema

from seller_service.models.product import MAX_PRICE, SIZES

PRICE_RULE = "Selling price cannot be greater than MRP"
PRICE_RANGE = validate.Range(min=0, max=MAX_PRICE)


def _size_quantities(**kwargs: Any) -> fields.Dict:
    return fields.Dict(
        keys=fields.String(validate=validate.OneOf(SIZES)),
        values=fields.Integer(validate=validate.Range(min=0)),
        data_key="sizeQuantities",
        **kwargs,
    )


class _PriceRuleMixin:
    @validates_schema
    def check_price_rule(self, data: dict[str, Any], **_: Any) -> None:
        mrp = data.get("mrp_price")
        selling = data.get("selling_price")
        if mrp is not None and selling is not None and selling > mrp:
            raise ValidationError(PRICE_RULE, field_name="sellingPrice")


class ProductCreateSchema(_PriceRuleMixin, Schema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=200))
    description = fields.String(load_default=None, allow_none=True)
    mrp_price = fields.Float(required=True, data_key="mrpPrice", validate=PRICE_RANGE)
    selling_price = fields.Float(
        required=True, data_key="sellingPrice", validate=PRICE_RANGE
    )
    images = fields.List(fields.String(validate=validate.Length(min=1)), load_default=list)
    category = fields.String(load_default=None, allow_none=True)
    subcategory = fields.String(load_default=None, allow_none=True)
    size_quantities = _size_quantities(load_default=None)
    is_active = fields.Boolean(load_default=True, data_key="isActive")


class ProductUpdateSchema(_PriceRuleMixin, Schema):
    """Partial update; the service re-checks prices against stored values."""

    name = fields.String(validate=validate.Length(min=1, max=200))
    description = fields.String()
    mrp_price = fields.Float(data_key="mrpPrice", validate=PRICE_RANGE)
    selling_price = fields.Float(data_key="sellingPrice", validate=PRICE_RANGE)
    images = fields.List(fields.String(validate=validate.Length(min=1)))
    category = fields.String()
    subcategory = fields.String()
    size_quantities = _size_quantities()
    is_active = fields.Boolean(data_key="isActive")


class ProductSchema(Schema):
    id = fields.String()
    seller_id = fields.String(data_key="sellerId")
    name = fields.String()
    description = fields.String(allow_none=True)
    mrp_price = fields.Float(data_key="mrpPrice")
    selling_price = fields.Float(data_key="sellingPrice")
    images = fields.List(fields.String())
    category = fields.String(allow_none=True)
    subcategory = fields.String(allow_none=True)
    size_quantities = fields.Dict(keys=fields.String(), values=fields.Integer(), data_key="sizeQuantities")
    is_active = fields.Boolean(data_key="isActive")
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")


class CatalogQuerySchema(Schema):
    """Optional public listing filters."""

    category = fields.String(load_default=None, validate=validate.Length(min=1, max=120))
    subcategory = fields.String(load_default=None, validate=validate.Length(min=1, max=120))
