"""Demo sellers and products for local runs; safe to apply repeatedly."""

from __future__ import annotations

import logging
from typing import Any, TypeVar, cast

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import select
from sqlalchemy.orm import Session

from seller_service.models.product import Product, default_size_quantities
from seller_service.models.seller import Seller

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

SELLER_FIXTURES: list[dict[str, Any]] = [
    {
        "phone": "9000000001",
        "password": "devPass123",
        "shop_name": "Threadline Studio",
        "owner_name": "Asha Rao",
        "address": "12 MG Road",
        "city": "Bengaluru",
        "state": "Karnataka",
        "pincode": "560001",
        "open_time": "10:00",
        "close_time": "21:00",
        "categories": ["Men", "Women"],
    },
    {
        "phone": "9000000002",
        "password": "devPass456",
        "shop_name": "Little Loom",
        "owner_name": "Vikram Shah",
        "address": "4 Park Street",
        "city": "Kolkata",
        "state": "West Bengal",
        "pincode": "700016",
        "open_time": "11:00",
        "close_time": "20:00",
        "categories": ["Kids"],
    },
]

PRODUCT_FIXTURES: list[dict[str, Any]] = [
    {
        "seller_phone": "9000000001",
        "name": "Linen Shirt",
        "description": "Relaxed fit linen shirt.",
        "mrp_price": 1999.0,
        "selling_price": 1499.0,
        "category": "Men",
        "subcategory": "Shirts",
        "size_quantities": {"XS": 0, "S": 4, "M": 10, "L": 8, "XL": 2},
    },
    {
        "seller_phone": "9000000001",
        "name": "Pleated Midi Skirt",
        "description": None,
        "mrp_price": 2499.0,
        "selling_price": 2499.0,
        "category": "Women",
        "subcategory": "Skirts",
        "size_quantities": {"XS": 3, "S": 5, "M": 5, "L": 2, "XL": 0},
    },
    {
        "seller_phone": "9000000002",
        "name": "Cotton Romper",
        "description": "Soft cotton romper.",
        "mrp_price": 899.0,
        "selling_price": 699.0,
        "category": "Kids",
        "subcategory": "Rompers",
        "size_quantities": None,
        "is_active": False,
    },
]


def _session(database: SQLAlchemy) -> Session:
    return cast(Session, database.session)


def _touch(summary: dict[str, dict[str, int]], table: str, created: bool) -> None:
    """Count one row under ``created`` or ``existing``."""
    entry = summary.setdefault(table, {"created": 0, "existing": 0})
    if created:
        entry["created"] += 1
    else:
        entry["existing"] += 1


def _get_or_create(
    session: Session,
    model: type[T],
    *,
    defaults: dict[str, Any] | None = None,
    **filters: Any,
) -> tuple[T, bool]:
    """Return ``(row, created)``; new rows get ``defaults`` plus ``filters``."""
    instance = session.execute(select(model).filter_by(**filters)).scalar_one_or_none()
    if instance is not None:
        return instance, False
    params = dict(defaults or {})
    params.update(filters)
    instance = cast(T, model(**params))
    session.add(instance)
    return instance, True


def seed_sellers(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Create demo sellers with complete shop profiles."""
    session = _session(database)
    summary: dict[str, dict[str, int]] = {}
    for fixture in SELLER_FIXTURES:
        data = dict(fixture)
        password = data.pop("password")
        phone = data.pop("phone")
        seller, created = _get_or_create(session, Seller, defaults=data, phone=phone)
        if created:
            seller.password = password
        _touch(summary, "sellers", created)
        if verbose:
            LOGGER.info("Seller %s %s", phone, "created" if created else "exists")
    session.flush()
    return summary


def seed_products(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Create demo products (one inactive) keyed by seller phone and name."""
    session = _session(database)
    summary: dict[str, dict[str, int]] = {}
    for fixture in PRODUCT_FIXTURES:
        data = dict(fixture)
        seller = session.execute(
            select(Seller).where(Seller.phone == data.pop("seller_phone"))
        ).scalar_one()
        data["size_quantities"] = data.get("size_quantities") or default_size_quantities()
        name = data.pop("name")
        _, created = _get_or_create(
            session, Product, defaults=data, seller_id=seller.id, name=name
        )
        _touch(summary, "products", created)
        if verbose:
            LOGGER.info("Product %s %s", name, "created" if created else "exists")
    session.flush()
    return summary


def run_all(database: SQLAlchemy, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Run all seeders in foreign-key order and commit once."""
    if verbose:
        LOGGER.info("Seeding sellers and products")
    combined: dict[str, dict[str, int]] = {}
    for func in (seed_sellers, seed_products):
        result = func(database, verbose=verbose)
        for table, counters in result.items():
            entry = combined.setdefault(table, {"created": 0, "existing": 0})
            entry["created"] += counters.get("created", 0)
            entry["existing"] += counters.get("existing", 0)
    _session(database).commit()
    return combined


__all__ = ["seed_sellers", "seed_products", "run_all"]
