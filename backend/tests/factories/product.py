"""Factory Boy definition for :class:`seller_service.models.product.Product`."""

from __future__ import annotations

import factory

from seller_service.models.product import Product, default_size_quantities
from tests.factories import BaseFactory
from tests.factories.seller import SellerFactory


class ProductFactory(BaseFactory):
    """Active, correctly priced product owned by a fresh seller unless given one."""

    class Meta:
        model = Product

    seller = factory.SubFactory(SellerFactory)
    name = factory.Sequence(lambda n: f"Product {n}")
    description = factory.Faker("sentence")
    mrp_price = 1000.0
    selling_price = 800.0
    images = factory.LazyFunction(list)
    category = "Men"
    subcategory = "Shirts"
    size_quantities = factory.LazyFunction(default_size_quantities)
    is_active = True
