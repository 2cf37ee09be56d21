"""Seller profile schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class SellerSchema(Schema):
    """Public seller representation (credentials are never dumped)."""

    id = fields.String(dump_only=True)
    phone = fields.String()
    shop_name = fields.String(allow_none=True, data_key="shopName")
    owner_name = fields.String(allow_none=True, data_key="ownerName")
    address = fields.String(allow_none=True)
    city = fields.String(allow_none=True)
    state = fields.String(allow_none=True)
    pincode = fields.String(allow_none=True)
    open_time = fields.String(allow_none=True, data_key="openTime")
    close_time = fields.String(allow_none=True, data_key="closeTime")
    categories = fields.List(fields.String())
    created_at = fields.DateTime(dump_only=True, data_key="createdAt")
    updated_at = fields.DateTime(dump_only=True, data_key="updatedAt")


class SellerDetailsSchema(Schema):
    """Partial profile update; every field is optional."""

    shop_name = fields.String(data_key="shopName", validate=validate.Length(min=1, max=120))
    owner_name = fields.String(data_key="ownerName", validate=validate.Length(min=1, max=120))
    address = fields.String(validate=validate.Length(max=255))
    city = fields.String(validate=validate.Length(max=80))
    state = fields.String(validate=validate.Length(max=80))
    pincode = fields.String(validate=validate.Regexp(r"^\d{4,10}$", error="Invalid pincode."))
    open_time = fields.String(
        data_key="openTime", validate=validate.Regexp(TIME_PATTERN, error="Use HH:MM.")
    )
    close_time = fields.String(
        data_key="closeTime", validate=validate.Regexp(TIME_PATTERN, error="Use HH:MM.")
    )
    categories = fields.List(fields.String(validate=validate.Length(min=1, max=120)))
