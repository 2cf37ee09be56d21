# seller_service/services/tokens/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from seller_service.services._shared.dto import TokenPairOut


@dataclass(frozen=True, slots=True)
class AuthTokenConfig:
    """
    Token emission configuration.

    :param access_expires: Access token lifetime.
    :type access_expires: timedelta
    :param refresh_expires: Refresh token lifetime.
    :type refresh_expires: timedelta
    """

    access_expires: timedelta = timedelta(minutes=15)
    refresh_expires: timedelta = timedelta(days=7)


@dataclass(frozen=True, slots=True)
class RotationOut:
    """
    Result of a successful refresh rotation.

    :param seller_id: Seller the rotated token belongs to.
    :type seller_id: str
    :param tokens: Newly issued pair; the refresh row now stores ``tokens.refresh_token``.
    :type tokens: TokenPairOut
    """

    seller_id: str
    tokens: TokenPairOut
