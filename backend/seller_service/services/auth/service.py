# seller_service/services/auth/service.py
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from seller_service.models.seller import Seller
from seller_service.services._shared.base import BaseService
from seller_service.services._shared.errors import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
    violates,
)
from seller_service.services.auth.dto import AuthOut, LogoutIn, RefreshIn, SigninIn, SignupIn
from seller_service.services.sellers.dto import SellerOut
from seller_service.services.tokens.service import TokenService

log = logging.getLogger(__name__)

PHONE_TAKEN = "Phone number already registered"


class AuthService(BaseService):
    """
    Session lifecycle (signup / signin / refresh / logout).

    Token minting and refresh-row bookkeeping are delegated to
    :class:`TokenService`; this service owns the transactions that tie them
    to seller records.
    """

    def __init__(self, *, token_service: TokenService, **kwargs) -> None:
        super().__init__(**kwargs)
        self.tokens = token_service

    # ------------------------------------------------------------------ #
    # Signup
    # ------------------------------------------------------------------ #

    def signup(self, dto: SignupIn) -> AuthOut:
        """
        Create a seller and open its first session.

        The seller row and its refresh row are written in one transaction.

        :raises ConflictError: Phone already registered (nothing is written).
        """
        with self.rw_uow() as uow:
            if uow.sellers.exists_by_phone(dto.phone):
                raise ConflictError("Seller", PHONE_TAKEN, code="PHONE_TAKEN")

            seller = Seller(phone=dto.phone)
            seller.password = dto.password
            try:
                uow.sellers.add(seller)
            except IntegrityError as exc:
                if violates(exc, "uq_sellers_phone", "sellers.phone"):
                    raise ConflictError("Seller", PHONE_TAKEN, code="PHONE_TAKEN") from exc
                raise

            pair = self.tokens.issue_pair(seller.id)
            self.tokens.persist_refresh_token(uow.refresh_tokens, seller.id, pair)
            out = AuthOut(tokens=pair, seller=SellerOut.from_model(seller))

        log.info("Seller signed up", extra={"seller_id": out.seller.id})
        return out

    # ------------------------------------------------------------------ #
    # Signin
    # ------------------------------------------------------------------ #

    def signin(self, dto: SigninIn) -> AuthOut:
        """
        Verify credentials and replace every stored refresh token of the
        seller with a fresh one.

        :raises NotFoundError: Unknown phone.
        :raises InvalidCredentialsError: Wrong password; no token is issued.
        """
        with self.rw_uow() as uow:
            seller = uow.sellers.get_by_phone(dto.phone)
            if seller is None:
                raise NotFoundError("Seller", "phone")
            if not seller.verify_password(dto.password):
                log.warning("Invalid password", extra={"seller_id": seller.id})
                raise InvalidCredentialsError()

            removed = uow.refresh_tokens.delete_for_seller(seller.id)
            pair = self.tokens.issue_pair(seller.id)
            self.tokens.persist_refresh_token(uow.refresh_tokens, seller.id, pair)
            out = AuthOut(tokens=pair, seller=SellerOut.from_model(seller))

        log.info("Seller signed in", extra={"seller_id": out.seller.id, "count": removed})
        return out

    # ------------------------------------------------------------------ #
    # Refresh
    # ------------------------------------------------------------------ #

    def refresh(self, dto: RefreshIn) -> AuthOut:
        """
        Rotate the refresh token and return the new pair with the seller.

        :raises ValidationError: No token supplied.
        :raises AuthenticationError: Any rotation failure (see
            :meth:`TokenService.rotate_refresh_token`).
        :raises NotFoundError: Seller vanished after the token was issued.
        """
        if not dto.refresh_token:
            raise ValidationError("Refresh token is required")

        rotation = self.tokens.rotate_refresh_token(dto.refresh_token)
        with self.ro_uow() as uow:
            seller = uow.sellers.get(rotation.seller_id)
            if seller is None:
                raise NotFoundError("Seller", rotation.seller_id)
            return AuthOut(tokens=rotation.tokens, seller=SellerOut.from_model(seller))

    # ------------------------------------------------------------------ #
    # Logout
    # ------------------------------------------------------------------ #

    def logout(self, dto: LogoutIn) -> int:
        """
        Revoke the given refresh token for the seller.

        Succeeds even when nothing matched.

        :returns: Number of rows removed.
        :raises ValidationError: No token supplied.
        """
        if not dto.refresh_token:
            raise ValidationError("Refresh token is required")
        return self.tokens.revoke(dto.seller_id, dto.refresh_token)
