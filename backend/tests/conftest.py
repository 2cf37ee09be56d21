"""Pytest fixtures configuring an isolated transactional database layer.

Each test runs inside an outer transaction on a single in-memory SQLite
connection. Sessions join it through SAVEPOINTs, so service code may
``commit()`` and ``rollback()`` freely while nothing leaks between cases.
"""

from __future__ import annotations

import os

import pytest
from flask import Flask
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import scoped_session, sessionmaker

from seller_service.core.config import TestingConfig
from seller_service.core.extensions import db as _db
from seller_service.factory import create_app
from seller_service.services._shared.ports.blob_store import InMemoryBlobStore


class PytestConfig(TestingConfig):
    """Testing configuration pinned to an in-memory database."""

    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    LOG_LEVEL = "WARNING"
    STORAGE_BACKEND = "memory"
    MAX_UPLOAD_FILES = 5
    MAX_IMAGE_BYTES = 1024


def _enable_sqlite_savepoints(engine: Engine) -> None:
    """Let pysqlite honour BEGIN/SAVEPOINT as SQLAlchemy emits them."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, _record):  # pragma: no cover - event hook
        dbapi_connection.isolation_level = None
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):  # pragma: no cover - event hook
        conn.exec_driver_sql("BEGIN")


@pytest.fixture(scope="session")
def app() -> Flask:
    """Create a Flask application configured for testing."""
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    application = create_app(PytestConfig)
    application.logger.setLevel("WARNING")
    return application


@pytest.fixture(scope="session")
def db(app):
    """Create database tables once per test session."""
    with app.app_context():
        _enable_sqlite_savepoints(_db.engine)
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope="session")
def connection(db):
    """Keep a dedicated connection open for the whole session."""
    conn = db.engine.connect()
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture()
def session(db, connection):
    """
    Provide a scoped session bound to the shared connection.

    ``join_transaction_mode="create_savepoint"`` turns every commit or
    rollback issued by application code into a SAVEPOINT release or
    rollback; the outer transaction is discarded after the test.
    """
    outer = connection.begin()
    factory = sessionmaker(
        bind=connection,
        join_transaction_mode="create_savepoint",
        expire_on_commit=False,
        autoflush=False,
    )
    scoped = scoped_session(factory)

    original_session = db.session
    db.session = scoped
    try:
        yield scoped
    finally:
        scoped.remove()
        db.session = original_session
        outer.rollback()


@pytest.fixture()
def client(app, session):
    """Return a Flask test client sharing the transactional session."""
    return app.test_client()


@pytest.fixture()
def blob_store(app, db) -> InMemoryBlobStore:
    """The in-memory image store wired into the container, emptied per test."""
    from seller_service.core.container import get_container

    store = get_container().blob_store
    assert isinstance(store, InMemoryBlobStore)
    store.objects.clear()
    return store


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


# -- Hook up Factory Boy to pytest SQLAlchemy session --------------------------
@pytest.fixture(autouse=True)
def _factories_session(session):
    """Wire Factory Boy's session helper to the transactional session fixture."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(session)
    yield
    SQLAlchemySession.set(None)


# -- Shared domain fixtures ----------------------------------------------------
@pytest.fixture()
def seller(session):
    """A committed seller whose password is ``DEFAULT_PASSWORD``."""
    from tests.factories.seller import SellerFactory

    obj = SellerFactory()
    session.commit()
    return obj


@pytest.fixture()
def other_seller(session):
    from tests.factories.seller import SellerFactory

    obj = SellerFactory()
    session.commit()
    return obj
