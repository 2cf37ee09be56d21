"""SQL-backed refresh token store."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, select, update

from seller_service.models.base import as_utc
from seller_service.models.refresh_token import RefreshToken
from seller_service.repositories.base import BaseRepository
from seller_service.services._shared.ports.refresh_token_store import RefreshTokenView


def _view(row: RefreshToken) -> RefreshTokenView:
    return RefreshTokenView(
        id=row.id,
        seller_id=row.seller_id,
        token=row.token,
        expires_at=as_utc(row.expires_at),
    )


class RefreshTokenRepository(BaseRepository[RefreshToken]):
    """Implements :class:`~seller_service.services._shared.ports.RefreshTokenStore`.

    Bulk deletes use Core statements with ``synchronize_session=False`` and
    return the affected row count.
    """

    model = RefreshToken

    def add_token(self, *, seller_id: str, token: str, expires_at: datetime) -> RefreshTokenView:
        row = self.add(RefreshToken(seller_id=seller_id, token=token, expires_at=expires_at))
        return _view(row)

    def find_for_seller(self, *, seller_id: str, token: str) -> RefreshTokenView | None:
        stmt = (
            select(RefreshToken)
            .where(RefreshToken.token == token, RefreshToken.seller_id == seller_id)
            .execution_options(populate_existing=True)
        )
        row = self.session.execute(stmt).scalars().first()
        return _view(row) if row is not None else None

    def replace_token(self, row_id: int, *, token: str, expires_at: datetime) -> None:
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.id == row_id)
            .values(token=token, expires_at=expires_at)
            .execution_options(synchronize_session=False)
        )
        self.session.execute(stmt)

    def delete_record(self, row_id: int) -> None:
        stmt = (
            delete(RefreshToken)
            .where(RefreshToken.id == row_id)
            .execution_options(synchronize_session=False)
        )
        self.session.execute(stmt)

    def delete_for_seller(self, seller_id: str) -> int:
        stmt = (
            delete(RefreshToken)
            .where(RefreshToken.seller_id == seller_id)
            .execution_options(synchronize_session=False)
        )
        return int(self.session.execute(stmt).rowcount or 0)

    def delete_matching(self, *, seller_id: str, token: str) -> int:
        stmt = (
            delete(RefreshToken)
            .where(RefreshToken.seller_id == seller_id, RefreshToken.token == token)
            .execution_options(synchronize_session=False)
        )
        return int(self.session.execute(stmt).rowcount or 0)
