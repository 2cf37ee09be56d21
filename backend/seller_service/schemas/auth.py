"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

from .seller import SellerSchema

PHONE_PATTERN = r"^\+?\d{7,15}$"


class CredentialsSchema(Schema):
    """Input payload shared by signup and signin."""

    phone = fields.String(
        required=True,
        validate=validate.Regexp(PHONE_PATTERN, error="Phone must contain 7 to 15 digits."),
    )
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=6, max=128))


class SignupSchema(CredentialsSchema):
    """Input payload for seller signup."""


class SigninSchema(CredentialsSchema):
    """Input payload for seller signin."""


class RefreshTokenSchema(Schema):
    """Input payload carrying a refresh token (refresh and logout)."""

    refresh_token = fields.String(
        required=True,
        data_key="refreshToken",
        validate=validate.Length(min=1, error="Refresh token is required"),
    )


class AuthResponseSchema(Schema):
    """Response payload: freshly issued tokens plus the seller profile."""

    access_token = fields.Function(lambda out: out.tokens.access_token, data_key="accessToken")
    refresh_token = fields.Function(lambda out: out.tokens.refresh_token, data_key="refreshToken")
    seller = fields.Nested(SellerSchema)
