# seller_service/services/sellers/service.py
from __future__ import annotations

import logging

from seller_service.services._shared.base import BaseService
from seller_service.services._shared.errors import NotFoundError
from seller_service.services.sellers.dto import SellerDetailsIn, SellerOut

log = logging.getLogger(__name__)


class SellerService(BaseService):
    """Seller profile reads and ownership-checked updates."""

    def get_profile(self, seller_id: str) -> SellerOut:
        """
        :raises NotFoundError: If the seller no longer exists.
        """
        with self.ro_uow() as uow:
            seller = uow.sellers.get(seller_id)
            if seller is None:
                raise NotFoundError("Seller", seller_id)
            return SellerOut.from_model(seller)

    def update_profile(self, seller_id: str, dto: SellerDetailsIn, *, actor_id: str | None) -> SellerOut:
        """
        Apply the supplied profile fields.

        :param seller_id: Seller addressed by the request path.
        :param dto: Fields to change; unset fields are left as they are.
        :param actor_id: Authenticated seller.
        :raises AuthorizationError: When ``actor_id`` differs from ``seller_id``.
        :raises NotFoundError: When the seller does not exist.
        """
        self.ensure_owner(actor_id, seller_id, msg="You can only update your own details")

        with self.rw_uow() as uow:
            seller = uow.sellers.get(seller_id)
            if seller is None:
                raise NotFoundError("Seller", seller_id)
            changes = dto.provided()
            uow.sellers.assign_updates(seller, changes)
            out = SellerOut.from_model(seller)

        log.info("Seller details updated", extra={"seller_id": seller_id, "count": len(changes)})
        return out
