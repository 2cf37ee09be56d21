# seller_service/services/catalog/service.py
from __future__ import annotations

from seller_service.services._shared.base import BaseService
from seller_service.services._shared.errors import NotFoundError
from seller_service.services.products.dto import ProductOut


class CatalogService(BaseService):
    """Anonymous, read-only browsing. Inactive products are never returned."""

    def list_active(
        self, *, category: str | None = None, subcategory: str | None = None
    ) -> list[ProductOut]:
        """
        :param category: Prefix match on the product category.
        :param subcategory: Exact subcategory match.
        """
        with self.ro_uow() as uow:
            rows = uow.products.list_active(category=category, subcategory=subcategory)
            return [ProductOut.from_model(p) for p in rows]

    def get_active(self, product_id: str) -> ProductOut:
        """
        :raises NotFoundError: Unknown or inactive product.
        """
        with self.ro_uow() as uow:
            product = uow.products.get_active(product_id)
            if product is None:
                raise NotFoundError("Product", product_id)
            return ProductOut.from_model(product)
