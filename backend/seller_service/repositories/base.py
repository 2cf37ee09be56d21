"""Shared persistence helpers for seller and catalog repositories.

Repositories only read and stage rows. Commits and rollbacks belong to the
unit of work opened by services, so nothing here ends a transaction.

Each subclass declares three whitelists:

* ``_sortable_fields``: public sort key -> mapped column
* ``_filterable_fields``: equality filters accepted by ``find_one``/``list``
* ``_updatable_fields``: attributes ``assign_updates`` may touch
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar, cast

from sqlalchemy import Select, and_, select
from sqlalchemy.orm import InstrumentedAttribute, Session

from seller_service.core.extensions import db

E = TypeVar("E")

Column = InstrumentedAttribute[Any]


def parse_sort_tokens(raw: Iterable[str]) -> list[tuple[str, bool]]:
    """Turn ``["-createdAt", "name"]`` style tokens into ``(name, descending)`` pairs."""
    out: list[tuple[str, bool]] = []
    for token in raw:
        descending = token.startswith("-")
        name = token.lstrip("-").strip()
        if name:
            out.append((name, descending))
    return out


def apply_sorting(
    stmt: Select[Any],
    sortable: Mapping[str, Column],
    tokens: Iterable[str],
    *,
    pk_attr: Column | None,
) -> Select[Any]:
    """
    Add ``ORDER BY`` clauses for whitelisted tokens.

    Tokens without a mapping are dropped. ``pk_attr`` always closes the
    ordering so two rows with equal sort keys come back in a fixed order.
    """
    clauses = [
        col.desc() if descending else col.asc()
        for name, descending in parse_sort_tokens(tokens)
        if isinstance(col := sortable.get(name), InstrumentedAttribute)
    ]
    if clauses:
        stmt = stmt.order_by(*clauses)
    if pk_attr is not None:
        stmt = stmt.order_by(pk_attr.asc())
    return stmt


class BaseRepository(Generic[E]):
    """Single-model repository bound to an explicit or Flask-scoped session."""

    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session if self._session is not None else cast(Session, db.session)

    # Whitelists, overridden per model

    def _pk_attr(self) -> Column | None:
        return getattr(self.model, "id", None)

    def _sortable_fields(self) -> Mapping[str, Column]:
        return {}

    def _filterable_fields(self) -> Mapping[str, Column]:
        return {}

    def _updatable_fields(self) -> set[str]:
        return set()

    def _where(self, stmt: Select[Any], filters: Mapping[str, Any] | None) -> Select[Any]:
        allowed = self._filterable_fields()
        clauses = [
            allowed[key] == value
            for key, value in (filters or {}).items()
            if isinstance(allowed.get(key), InstrumentedAttribute)
        ]
        return stmt.where(and_(*clauses)) if clauses else stmt

    # Reads

    def get(self, entity_id: Any) -> E | None:
        """Load by primary key.

        :raises RuntimeError: The model exposes no ``id`` column.
        """
        pk = self._pk_attr()
        if pk is None:
            raise RuntimeError(f"{type(self).__name__} has no primary key attribute")
        return cast(E | None, self.session.execute(select(self.model).where(pk == entity_id)).scalars().first())

    def find_one(self, **filters: Any) -> E | None:
        """First row matching the whitelisted filters; unknown keys are ignored."""
        stmt = self._where(select(self.model), filters)
        return cast(E | None, self.session.execute(stmt).scalars().first())

    def list(
        self,
        *,
        filters: Mapping[str, Any] | None = None,
        sort: Iterable[str] | None = None,
        limit: int | None = None,
    ) -> list[E]:
        stmt = self._where(select(self.model), filters)
        stmt = apply_sorting(stmt, self._sortable_fields(), sort or (), pk_attr=self._pk_attr())
        if limit is not None:
            stmt = stmt.limit(int(limit))
        return cast(list[E], list(self.session.execute(stmt).scalars()))

    # Writes

    def add(self, instance: E) -> E:
        """Stage ``instance`` and flush so generated keys are populated."""
        self.session.add(instance)
        self.flush()
        return instance

    def delete(self, instance: E) -> None:
        self.session.delete(instance)
        self.flush()

    def flush(self) -> None:
        self.session.flush()

    def assign_updates(
        self,
        instance: E,
        fields: Mapping[str, Any],
        *,
        strict: bool = True,
        flush: bool = True,
    ) -> E:
        """
        Copy whitelisted ``fields`` onto ``instance``.

        Values go through ``setattr`` so model ``@validates`` hooks run.

        :raises ValueError: ``strict`` is set and a key is not updatable.
        """
        allowed = self._updatable_fields()
        rejected = sorted(k for k in fields if k not in allowed)
        if rejected and strict:
            raise ValueError(f"Fields not updatable on {self.model.__name__}: {rejected}")
        for key, value in fields.items():
            if key in allowed:
                setattr(instance, key, value)
        if flush:
            self.flush()
        return instance
