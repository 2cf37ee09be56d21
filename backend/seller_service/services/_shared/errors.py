"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic**: they never import Flask or HTTP
helpers. Each class exposes a stable ``code`` consumed by
``seller_service/core/errors.py``, the only place where they are mapped to
transport status codes.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, *markers: str) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    Parameters
    ----------
    exc : IntegrityError
        The exception raised by SQLAlchemy during flush/commit.
    *markers : str
        Constraint names (e.g., 'uq_sellers_phone') or ``table.column``
        pairs; SQLite reports the latter instead of the constraint name.

    Returns
    -------
    bool
        True if the IntegrityError message mentions any marker.
    """
    message = str(exc.orig).lower() if exc.orig else ""
    return any(marker.lower() in message for marker in markers)


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from repositories or domain logic.
    """

    code = "SERVICE_ERROR"

    def __init__(self, message: str = "Request could not be processed") -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Malformed input or a violated business rule (e.g. selling price > MRP)."""

    code = "VALIDATION_ERROR"


class UnsupportedMediaTypeError(ValidationError):
    """Uploaded file is not an image."""

    code = "UNSUPPORTED_MEDIA_TYPE"


class FileTooLargeError(ValidationError):
    """Uploaded file exceeds the configured size limit."""

    code = "FILE_TOO_LARGE"


class StorageError(ServiceError):
    """Object storage failed; surfaced as an internal error."""

    code = "STORAGE_ERROR"

    def __init__(self, message: str = "Image storage failed") -> None:
        super().__init__(message)


# --------------------------------------------------------------------------- #
# Authentication / authorization
# --------------------------------------------------------------------------- #


class AuthenticationError(ServiceError):
    """Credentials or bearer token could not be verified."""

    code = "UNAUTHORIZED"


class InvalidCredentialsError(AuthenticationError):
    code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid password") -> None:
        super().__init__(message)


class TokenInvalidError(AuthenticationError):
    """Signature mismatch, malformed payload or missing ``sellerId`` claim."""

    code = "INVALID_TOKEN"

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message)


class TokenExpiredError(AuthenticationError):
    code = "TOKEN_EXPIRED"

    def __init__(self, message: str = "Token has expired") -> None:
        super().__init__(message)


class RefreshTokenNotFoundError(AuthenticationError):
    """The refresh token is well-formed but no stored row matches it."""

    code = "REFRESH_NOT_FOUND"

    def __init__(self, message: str = "Refresh token not found or already used") -> None:
        super().__init__(message)


class RefreshTokenExpiredError(AuthenticationError):
    """The stored refresh row is past its expiry (the row has been removed)."""

    code = "REFRESH_EXPIRED"

    def __init__(self, message: str = "Refresh token has expired") -> None:
        super().__init__(message)


class AuthorizationError(ServiceError):
    """Authenticated actor is not allowed to touch the resource."""

    code = "FORBIDDEN"

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)


# --------------------------------------------------------------------------- #
# Persistence-shaped errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True, eq=False)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., "Seller").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int
    code = "NOT_FOUND"

    def __post_init__(self) -> None:
        Exception.__init__(self, str(self))

    @property
    def message(self) -> str:
        return f"{self.entity} not found"

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True, eq=False)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "Seller").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    :param code: Stable machine-readable code.
    :type code: str
    """

    entity: str
    detail: str
    code: str = "CONFLICT"

    def __post_init__(self) -> None:
        Exception.__init__(self, str(self))

    @property
    def message(self) -> str:
        return self.detail

    def __str__(self) -> str:
        return f"Conflict on {self.entity}: {self.detail}"
