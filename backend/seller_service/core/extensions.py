"""Process-wide extension singletons bound to the app in :func:`init_app`."""

from __future__ import annotations

from flask import Flask
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

# Deterministic constraint names so batch migrations can address them
NAMING_CONVENTION = {
    "pk": "pk_%(table_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
}

db: SQLAlchemy = SQLAlchemy(
    metadata=MetaData(naming_convention=NAMING_CONVENTION),
    session_options={"autoflush": False},
)
migrate = Migrate(render_as_batch=True)


def init_app(app: Flask) -> None:
    db.init_app(app)
    # Register seller, product and refresh token tables on the metadata
    from seller_service import models  # noqa: F401

    migrate.init_app(app, db)
