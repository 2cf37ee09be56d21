"""Seller account endpoints: session lifecycle and profile."""

from __future__ import annotations

from flask import Blueprint

from seller_service.api.deps import (
    auth_service,
    current_seller_id,
    json_response,
    load_json,
    require_auth,
    seller_service,
    timing,
)
from seller_service.schemas import (
    AuthResponseSchema,
    MessageSchema,
    RefreshTokenSchema,
    SellerDetailsSchema,
    SellerSchema,
    SigninSchema,
    SignupSchema,
)
from seller_service.services.auth.dto import LogoutIn, RefreshIn, SigninIn, SignupIn
from seller_service.services.sellers.dto import SellerDetailsIn

bp = Blueprint("auth", __name__)

signup_schema = SignupSchema()
signin_schema = SigninSchema()
refresh_schema = RefreshTokenSchema()
details_schema = SellerDetailsSchema()
auth_response_schema = AuthResponseSchema()
seller_schema = SellerSchema()
message_schema = MessageSchema()


@bp.post("/signup")
@timing
def signup():
    """Create a seller account and return its first token pair."""

    data = load_json(signup_schema)
    result = auth_service().signup(SignupIn(**data))
    return json_response({"data": auth_response_schema.dump(result)}, status=201)


@bp.post("/signin")
@timing
def signin():
    data = load_json(signin_schema)
    result = auth_service().signin(SigninIn(**data))
    return json_response({"data": auth_response_schema.dump(result)})


@bp.post("/refresh-token")
@timing
def refresh_token():
    """Exchange a refresh token for a new pair (the old one stops working)."""

    data = load_json(refresh_schema)
    result = auth_service().refresh(RefreshIn(refresh_token=data["refresh_token"]))
    return json_response({"data": auth_response_schema.dump(result)})


@bp.post("/logout")
@require_auth
@timing
def logout():
    data = load_json(refresh_schema)
    auth_service().logout(LogoutIn(seller_id=current_seller_id(), refresh_token=data["refresh_token"]))
    return json_response(message_schema.dump({"message": "Logged out successfully"}))


@bp.get("/profile")
@require_auth
@timing
def profile():
    seller = seller_service().get_profile(current_seller_id())
    return json_response({"data": seller_schema.dump(seller)})


@bp.patch("/<string:seller_id>/details")
@require_auth
@timing
def update_details(seller_id: str):
    """Partially update the shop profile of the authenticated seller."""

    data = load_json(details_schema)
    seller = seller_service().update_profile(
        seller_id, SellerDetailsIn(**data), actor_id=current_seller_id()
    )
    return json_response({"data": seller_schema.dump(seller)})
