"""Fixtures for HTTP-level tests."""

from __future__ import annotations

import pytest

from tests.helpers.auth import issue_access_token
from tests.helpers.http import bearer


@pytest.fixture()
def auth_header(seller) -> dict[str, str]:
    return bearer(issue_access_token(seller.id))


@pytest.fixture()
def other_auth_header(other_seller) -> dict[str, str]:
    return bearer(issue_access_token(other_seller.id))
