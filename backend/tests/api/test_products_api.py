"""Integration tests for the seller's product endpoints."""

from __future__ import annotations

from tests.factories.product import ProductFactory
from tests.helpers.http import assert_problem

BASE = "/api/v1/products"

PAYLOAD = {
    "name": "Denim Jacket",
    "description": "Washed blue denim.",
    "mrpPrice": 2999,
    "sellingPrice": 2499,
    "category": "Men",
    "subcategory": "Jackets",
    "sizeQuantities": {"S": 2, "M": 5},
}


def test_create_requires_auth(client):
    assert_problem(client.post(BASE, json=PAYLOAD), 401, "AUTH_REQUIRED")


def test_create_product(client, seller, auth_header):
    seller_id = seller.id
    resp = client.post(BASE, json=PAYLOAD, headers=auth_header)

    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["sellerId"] == seller_id
    assert data["sellingPrice"] == 2499
    assert data["isActive"] is True
    assert data["sizeQuantities"] == {"S": 2, "M": 5}


def test_create_rejects_selling_above_mrp(client, auth_header):
    resp = client.post(BASE, json={**PAYLOAD, "sellingPrice": 3500}, headers=auth_header)
    body = assert_problem(resp, 400, "VALIDATION_ERROR")
    assert body["details"]["errors"]["sellingPrice"] == ["Selling price cannot be greater than MRP"]


def test_create_rejects_unknown_size_and_negative_stock(client, auth_header):
    resp = client.post(BASE, json={**PAYLOAD, "sizeQuantities": {"XXL": 1}}, headers=auth_header)
    assert_problem(resp, 400, "VALIDATION_ERROR")
    resp = client.post(BASE, json={**PAYLOAD, "sizeQuantities": {"M": -1}}, headers=auth_header)
    assert_problem(resp, 400, "VALIDATION_ERROR")


def test_prices_beyond_column_precision_are_rejected(client, session, seller, auth_header):
    resp = client.post(BASE, json={**PAYLOAD, "mrpPrice": 1e12}, headers=auth_header)
    body = assert_problem(resp, 400, "VALIDATION_ERROR")
    assert "mrpPrice" in body["details"]["errors"]

    product_id = ProductFactory(seller=seller).id
    session.commit()
    resp = client.put(
        f"{BASE}/{product_id}", json={"mrpPrice": 1e12, "sellingPrice": 1e11}, headers=auth_header
    )
    body = assert_problem(resp, 400, "VALIDATION_ERROR")
    assert set(body["details"]["errors"]) == {"mrpPrice", "sellingPrice"}


def test_largest_storable_price_is_accepted(client, auth_header):
    resp = client.post(
        BASE, json={**PAYLOAD, "mrpPrice": 99999999.99, "sellingPrice": 99999999.99}, headers=auth_header
    )
    assert resp.status_code == 201


def test_list_own_products_includes_inactive(client, session, seller, other_seller, auth_header):
    ids = {ProductFactory(seller=seller).id, ProductFactory(seller=seller, is_active=False).id}
    ProductFactory(seller=other_seller)
    session.commit()

    resp = client.get(BASE, headers=auth_header)
    assert resp.status_code == 200
    assert {p["id"] for p in resp.get_json()["data"]} == ids


def test_get_update_delete_own_product(client, session, seller, auth_header):
    product_id = ProductFactory(seller=seller, mrp_price=1000.0, selling_price=900.0).id
    session.commit()

    assert client.get(f"{BASE}/{product_id}", headers=auth_header).status_code == 200

    resp = client.put(f"{BASE}/{product_id}", json={"name": "Updated", "isActive": False}, headers=auth_header)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["name"] == "Updated"
    assert resp.get_json()["data"]["isActive"] is False

    resp = client.delete(f"{BASE}/{product_id}", headers=auth_header)
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Product deleted successfully"}
    assert_problem(client.get(f"{BASE}/{product_id}", headers=auth_header), 404, "NOT_FOUND")


def test_update_checks_price_against_stored_mrp(client, session, seller, auth_header):
    product_id = ProductFactory(seller=seller, mrp_price=1000.0, selling_price=900.0).id
    session.commit()

    resp = client.put(f"{BASE}/{product_id}", json={"mrpPrice": 800}, headers=auth_header)
    body = assert_problem(resp, 400, "VALIDATION_ERROR")
    assert body["detail"] == "Selling price cannot be greater than MRP"


def test_other_sellers_product_is_forbidden(client, session, seller, other_auth_header):
    product_id = ProductFactory(seller=seller).id
    session.commit()

    assert_problem(client.get(f"{BASE}/{product_id}", headers=other_auth_header), 403, "FORBIDDEN")
    assert_problem(
        client.put(f"{BASE}/{product_id}", json={"name": "x"}, headers=other_auth_header), 403, "FORBIDDEN"
    )
    assert_problem(client.delete(f"{BASE}/{product_id}", headers=other_auth_header), 403, "FORBIDDEN")


def test_unknown_product(client, auth_header):
    assert_problem(client.delete(f"{BASE}/does-not-exist", headers=auth_header), 404, "NOT_FOUND")
