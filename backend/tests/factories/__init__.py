"""Model factories persisting through the per-test transactional session."""

from __future__ import annotations

import factory


class SQLAlchemySession:
    """Holder for the session the autouse fixture installs for each test."""

    _session = None

    @classmethod
    def set(cls, session):
        cls._session = session

    @classmethod
    def get(cls):
        if cls._session is None:
            raise RuntimeError("No factory session installed; request the 'session' fixture.")
        return cls._session


class BaseFactory(factory.alchemy.SQLAlchemyModelFactory):
    class Meta:
        abstract = True
        sqlalchemy_session_factory = SQLAlchemySession.get
        # Flush only: tests decide when to commit the savepoint
        sqlalchemy_session_persistence = "flush"
