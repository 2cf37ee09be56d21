"""Units of work over the Flask-SQLAlchemy session."""

from __future__ import annotations

from contextlib import suppress

from sqlalchemy import event
from sqlalchemy.exc import InvalidRequestError
from sqlalchemy.orm import Session, SessionTransaction

from seller_service.core.extensions import db
from seller_service.repositories import (
    ProductRepository,
    RefreshTokenRepository,
    SellerRepository,
)
from seller_service.uow.base import UnitOfWork


class SQLAlchemyRepositoryContainer:
    """Seller, product and refresh token repositories on one session."""

    def __init__(self, *, session: Session) -> None:
        self.session = session
        self.sellers = SellerRepository(session=self.session)
        self.products = ProductRepository(session=self.session)
        self.refresh_tokens = RefreshTokenRepository(session=self.session)


class SQLAlchemyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """Commits on a clean exit, rolls back when the block raises."""

    def __init__(self, session: Session | None = None) -> None:
        super().__init__(session=session if session is not None else db.session)

    def __enter__(self) -> SQLAlchemyUnitOfWork:
        # Session autobegins on first statement
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            try:
                self.commit()
            except Exception:
                self.rollback()
                raise
        else:
            self.rollback()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


class SQLAlchemyReadOnlyUnitOfWork(SQLAlchemyRepositoryContainer, UnitOfWork):
    """
    Unit of work for catalog and profile reads.

    While open, a ``before_flush`` hook rejects pending ORM writes and
    :meth:`commit` always raises. The transaction is rolled back on exit
    only if this unit started it. An already running transaction is joined
    and left as it was.
    """

    def __init__(self, session: Session | None = None) -> None:
        super().__init__(session=session if session is not None else db.session)
        self._txn_ctx: SessionTransaction | None = None
        self._listener_installed = False

    def __enter__(self) -> SQLAlchemyReadOnlyUnitOfWork:
        self._txn_ctx = None
        try:
            txn_ctx = self.session.begin()
            txn_ctx.__enter__()
            self._txn_ctx = txn_ctx
        except InvalidRequestError:
            # Outer transaction already open; join it
            pass
        self._install_listener()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if self._txn_ctx is not None:
                with suppress(Exception):
                    self.session.rollback()
                # Leave the SessionTransaction context opened in __enter__
                try:
                    self._txn_ctx.__exit__(exc_type, exc, tb)
                finally:
                    self._txn_ctx = None
        finally:
            self._remove_listener()

    def commit(self) -> None:
        raise RuntimeError("commit() is not available on a read-only unit of work")

    def rollback(self) -> None:
        self.session.rollback()

    def _before_flush(self, session, flush_context, instances) -> None:
        if session.new or session.dirty or session.deleted:
            raise RuntimeError("Pending changes cannot be flushed inside a read-only unit of work")

    def _install_listener(self) -> None:
        if self._listener_installed:
            return
        event.listen(self.session, "before_flush", self._before_flush)
        self._listener_installed = True

    def _remove_listener(self) -> None:
        if not self._listener_installed:
            return
        with suppress(Exception):
            event.remove(self.session, "before_flush", self._before_flush)
        self._listener_installed = False
