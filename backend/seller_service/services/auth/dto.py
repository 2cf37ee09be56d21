# seller_service/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass

from seller_service.services._shared.dto import TokenPairOut
from seller_service.services.sellers.dto import SellerOut

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class SignupIn:
    """
    Input DTO for signup.

    :param phone: Seller phone number (login identifier).
    :type phone: str
    :param password: Raw password, hashed by the model.
    :type password: str
    """

    phone: str
    password: str


@dataclass(frozen=True, slots=True)
class SigninIn:
    phone: str
    password: str


@dataclass(frozen=True, slots=True)
class RefreshIn:
    """
    Input DTO for token refresh.

    :param refresh_token: Encoded refresh JWT.
    :type refresh_token: str
    """

    refresh_token: str


@dataclass(frozen=True, slots=True)
class LogoutIn:
    """
    Input DTO for logout.

    :param seller_id: Authenticated seller (from the access token).
    :type seller_id: str
    :param refresh_token: Refresh token to revoke.
    :type refresh_token: str
    """

    seller_id: str
    refresh_token: str


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthOut:
    """
    Tokens plus the seller they were issued for.

    :param tokens: Access/refresh pair.
    :type tokens: TokenPairOut
    :param seller: Public seller view.
    :type seller: SellerOut
    """

    tokens: TokenPairOut
    seller: SellerOut
