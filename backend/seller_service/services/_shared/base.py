# seller_service/services/_shared/base.py
from __future__ import annotations

from dataclasses import dataclass

from seller_service.services._shared.errors import AuthorizationError
from seller_service.services._shared.policies.common import is_owner
from seller_service.uow.sqlalchemy_uow import (
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)


@dataclass(slots=True)
class ServiceContext:
    """
    Per-request data handed to every service.

    :param actor_id: Seller id from the access token, ``None`` on public routes.
    :param request_id: Correlation id echoed in logs and problem bodies.
    """

    actor_id: str | None = None
    request_id: str | None = None


class BaseService:
    """
    Common plumbing for seller, product, catalog and token services.

    Every use case runs inside exactly one unit of work: :meth:`rw_uow`
    commits when its block exits cleanly, :meth:`ro_uow` refuses writes.
    HTTP and ORM session objects never reach service signatures.
    """

    def __init__(self, *, ctx: ServiceContext | None = None) -> None:
        self.ctx = ctx or ServiceContext()

    def rw_uow(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork()

    def ro_uow(self) -> SQLAlchemyReadOnlyUnitOfWork:
        return SQLAlchemyReadOnlyUnitOfWork()

    def ensure_owner(self, actor_id: str | None, owner_id: str, *, msg: str | None = None) -> None:
        """
        :raises AuthorizationError: ``actor_id`` is not ``owner_id``.
        """
        if not is_owner(actor_id=actor_id, owner_id=owner_id):
            raise AuthorizationError(msg or "You can only modify your own resources")
