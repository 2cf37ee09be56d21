"""Common Marshmallow schemas shared across resources."""

from __future__ import annotations

from marshmallow import Schema, fields


class MessageSchema(Schema):
    """Plain acknowledgement body, e.g. after logout."""

    message = fields.String(required=True)


class HealthSchema(Schema):
    status = fields.String(required=True)
    database = fields.String(required=True)


class UploadedImagesSchema(Schema):
    urls = fields.List(fields.String(), required=True)
