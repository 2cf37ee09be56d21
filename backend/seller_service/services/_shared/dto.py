from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class TokenPairOut:
    """
    Access token plus the refresh token persisted alongside it.

    :param refresh_expires_at: Expiry written to the refresh row, UTC.
    :type refresh_expires_at: datetime
    """

    access_token: str
    refresh_token: str
    refresh_expires_at: datetime


@dataclass(frozen=True, slots=True)
class ProblemDetails:
    """``application/problem+json`` body; ``extra`` members are merged at top level."""

    type: str
    title: str
    status: int
    detail: str | None = None
    instance: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "title": self.title,
            "status": self.status,
            "detail": self.detail,
            "instance": self.instance,
            **self.extra,
        }
