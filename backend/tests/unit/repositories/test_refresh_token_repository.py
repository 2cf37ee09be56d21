"""Unit tests for the SQL-backed refresh token store."""

from datetime import timedelta

import pytest

from seller_service.models.base import utcnow
from seller_service.repositories import RefreshTokenRepository
from tests.factories.refresh_token import RefreshTokenFactory
from tests.helpers.db import count_refresh_rows


@pytest.fixture()
def store(session):
    return RefreshTokenRepository(session=session)


def test_add_and_find(store, session, seller):
    expires = utcnow() + timedelta(days=7)
    view = store.add_token(seller_id=seller.id, token="rt-1", expires_at=expires)
    session.commit()

    found = store.find_for_seller(seller_id=seller.id, token="rt-1")
    assert found == view
    assert found.expires_at.tzinfo is not None


def test_find_requires_matching_seller(store, session, seller, other_seller):
    RefreshTokenFactory(seller=seller, token="rt-shared")
    session.commit()

    assert store.find_for_seller(seller_id=other_seller.id, token="rt-shared") is None


def test_replace_token_updates_in_place(store, session, seller):
    row = RefreshTokenFactory(seller=seller, token="rt-old")
    session.commit()
    new_expiry = utcnow() + timedelta(days=1)

    store.replace_token(row.id, token="rt-new", expires_at=new_expiry)
    session.commit()

    assert store.find_for_seller(seller_id=seller.id, token="rt-old") is None
    view = store.find_for_seller(seller_id=seller.id, token="rt-new")
    assert view is not None
    assert view.id == row.id
    assert count_refresh_rows(session, seller.id) == 1


def test_delete_for_seller_returns_count(store, session, seller, other_seller):
    RefreshTokenFactory.create_batch(3, seller=seller)
    RefreshTokenFactory(seller=other_seller)
    session.commit()

    assert store.delete_for_seller(seller.id) == 3
    assert count_refresh_rows(session, seller.id) == 0
    assert count_refresh_rows(session, other_seller.id) == 1


def test_delete_matching_is_zero_when_nothing_matches(store, session, seller):
    RefreshTokenFactory(seller=seller, token="rt-keep")
    session.commit()

    assert store.delete_matching(seller_id=seller.id, token="rt-other") == 0
    assert store.delete_matching(seller_id=seller.id, token="rt-keep") == 1


def test_delete_record(store, session, seller):
    row = RefreshTokenFactory(seller=seller)
    session.commit()

    store.delete_record(row.id)
    assert count_refresh_rows(session, seller.id) == 0
