# ecommerce/repositories/revoked_token_repository.py

from sqlalchemy import select
from sqlalchemy.orm import Session

from ecommerce.core.base_repository import BaseRepository
from ecommerce.infrastructure.database.models.revoked_token_model import RevokedTokenModel


class RevokedTokenRepository(BaseRepository[RevokedTokenModel]):
    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def is_revoked(self, jti: str) -> bool:
        stmt = select(RevokedTokenModel.id).where(
            RevokedTokenModel.jti == jti,
            RevokedTokenModel.deleted_at.is_(None),
        )
        return self._session.execute(stmt).scalars().first() is not None
