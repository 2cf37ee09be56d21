"""Integration tests for signup, signin, refresh, logout and profile endpoints."""

from __future__ import annotations

from tests.factories.seller import DEFAULT_PASSWORD
from tests.helpers.http import assert_problem, bearer, signup


# ------------------------------- Signup ----------------------------------- #
def test_signup_returns_tokens_and_seller(client):
    resp = client.post("/api/v1/signup", json={"phone": "9000000200", "password": "secret123"})

    assert resp.status_code == 201
    data = resp.get_json()["data"]
    assert data["accessToken"]
    assert data["refreshToken"]
    assert data["seller"]["phone"] == "9000000200"
    assert "password" not in data["seller"]
    assert "passwordHash" not in data["seller"]


def test_signup_duplicate_phone(client):
    signup(client, "9000000201")
    resp = client.post("/api/v1/signup", json={"phone": "9000000201", "password": "secret456"})
    body = assert_problem(resp, 400, "PHONE_TAKEN")
    assert body["detail"] == "Phone number already registered"


def test_signup_validates_payload(client):
    resp = client.post("/api/v1/signup", json={"phone": "12ab", "password": "123"})
    body = assert_problem(resp, 400, "VALIDATION_ERROR")
    assert set(body["details"]["errors"]) == {"phone", "password"}


def test_signup_rejects_unknown_fields(client):
    resp = client.post(
        "/api/v1/signup", json={"phone": "9000000202", "password": "secret123", "role": "admin"}
    )
    assert_problem(resp, 400, "VALIDATION_ERROR")


# ------------------------------- Signin ----------------------------------- #
def test_signin_success(client, seller):
    phone, seller_id = seller.phone, seller.id
    resp = client.post("/api/v1/signin", json={"phone": phone, "password": DEFAULT_PASSWORD})

    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["seller"]["id"] == seller_id
    assert data["accessToken"] and data["refreshToken"]


def test_signin_wrong_password(client, seller):
    resp = client.post("/api/v1/signin", json={"phone": seller.phone, "password": "nope-nope"})
    body = assert_problem(resp, 401, "INVALID_CREDENTIALS")
    assert body["detail"] == "Invalid password"


def test_signin_unknown_phone(client):
    resp = client.post("/api/v1/signin", json={"phone": "9555555555", "password": "secret123"})
    assert_problem(resp, 404, "NOT_FOUND")


# ------------------------------- Refresh ---------------------------------- #
def test_refresh_rotates_tokens(client):
    first = signup(client, "9000000203")

    resp = client.post("/api/v1/refresh-token", json={"refreshToken": first["refreshToken"]})
    assert resp.status_code == 200
    second = resp.get_json()["data"]
    assert second["refreshToken"] != first["refreshToken"]
    assert second["seller"]["id"] == first["seller"]["id"]

    reused = client.post("/api/v1/refresh-token", json={"refreshToken": first["refreshToken"]})
    assert_problem(reused, 401, "REFRESH_NOT_FOUND")


def test_refresh_requires_token(client):
    assert_problem(client.post("/api/v1/refresh-token", json={}), 400, "VALIDATION_ERROR")
    assert_problem(
        client.post("/api/v1/refresh-token", json={"refreshToken": ""}), 400, "VALIDATION_ERROR"
    )


def test_refresh_with_invalid_token(client):
    resp = client.post("/api/v1/refresh-token", json={"refreshToken": "garbage"})
    assert_problem(resp, 401, "INVALID_TOKEN")


# ------------------------------- Logout ----------------------------------- #
def test_logout_requires_auth(client):
    resp = client.post("/api/v1/logout", json={"refreshToken": "x"})
    assert_problem(resp, 401, "AUTH_REQUIRED")


def test_logout_revokes_refresh_token(client):
    session_data = signup(client, "9000000204")
    headers = bearer(session_data["accessToken"])

    resp = client.post("/api/v1/logout", json={"refreshToken": session_data["refreshToken"]}, headers=headers)
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Logged out successfully"}

    again = client.post("/api/v1/refresh-token", json={"refreshToken": session_data["refreshToken"]})
    assert_problem(again, 401, "REFRESH_NOT_FOUND")


def test_logout_with_unknown_token_still_succeeds(client, auth_header):
    resp = client.post("/api/v1/logout", json={"refreshToken": "never-issued"}, headers=auth_header)
    assert resp.status_code == 200


# ------------------------------- Profile ---------------------------------- #
def test_profile_returns_seller(client, seller, auth_header):
    phone = seller.phone
    resp = client.get("/api/v1/profile", headers=auth_header)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["phone"] == phone


def test_update_own_details(client, seller, auth_header):
    seller_id = seller.id
    resp = client.patch(
        f"/api/v1/{seller_id}/details",
        json={"shopName": "Corner Store", "openTime": "07:45", "categories": ["Kids"]},
        headers=auth_header,
    )
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["shopName"] == "Corner Store"
    assert data["openTime"] == "07:45"
    assert data["categories"] == ["Kids"]


def test_update_other_sellers_details_forbidden(client, other_seller, auth_header):
    other_id = other_seller.id
    resp = client.patch(f"/api/v1/{other_id}/details", json={"shopName": "Mine now"}, headers=auth_header)
    assert_problem(resp, 403, "FORBIDDEN")


def test_update_details_validates_time_and_protected_fields(client, seller, auth_header):
    seller_id = seller.id
    bad_time = client.patch(f"/api/v1/{seller_id}/details", json={"openTime": "25:00"}, headers=auth_header)
    assert_problem(bad_time, 400, "VALIDATION_ERROR")

    phone = client.patch(f"/api/v1/{seller_id}/details", json={"phone": "9111111111"}, headers=auth_header)
    assert_problem(phone, 400, "VALIDATION_ERROR")
