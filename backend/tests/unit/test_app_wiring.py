import pytest

from seller_service.api import join_prefix
from seller_service.core.cors import parse_origins


@pytest.mark.parametrize(
    "segments, expected",
    [
        (("/api", "v1"), "/api/v1"),
        (("/api/", "/v1/", ""), "/api/v1"),
        (("/api/v1", "/products"), "/api/v1/products"),
        (("", ""), "/"),
    ],
)
def test_join_prefix(segments, expected):
    assert join_prefix(*segments) == expected


def test_parse_origins_strips_blanks():
    assert parse_origins(" http://a.test , ,https://b.test") == ["http://a.test", "https://b.test"]
    assert parse_origins(None) == []


def test_blueprints_mounted_under_version_prefix(app):
    rules = {rule.rule for rule in app.url_map.iter_rules()}
    assert "/api/v1/signup" in rules
    assert "/api/v1/products/upload-images" in rules
    assert "/api/v1/public/products/category/<path:category>" in rules


def test_preflight_allows_storefront_origin(client):
    resp = client.options(
        "/api/v1/products",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:3000"
    assert resp.headers.get("Access-Control-Allow-Credentials") == "true"
