# ecommerce/repositories/user_repository.py

import uuid

from sqlalchemy import exists, func, select
from sqlalchemy.orm import Session

from ecommerce.core.base_repository import BaseRepository
from ecommerce.infrastructure.database.models.user_model import UserModel


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _as_uuid(value: str | uuid.UUID) -> uuid.UUID | None:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


class UserRepository(BaseRepository[UserModel]):
    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_by_id(self, user_id: str | uuid.UUID) -> UserModel | None:
        parsed = _as_uuid(user_id)
        if parsed is None:
            return None
        stmt = select(UserModel).where(UserModel.id == parsed, UserModel.deleted_at.is_(None))
        return self._session.execute(stmt).scalar_one_or_none()

    def get_by_email(self, email: str) -> UserModel | None:
        stmt = select(UserModel).where(
            UserModel.email == normalize_email(email), UserModel.deleted_at.is_(None)
        )
        return self._session.execute(stmt).scalar_one_or_none()

    # uniqueness checks include soft-deleted rows: the unique constraints do too
    def exists_by_email(self, email: str) -> bool:
        stmt = select(exists().where(UserModel.email == normalize_email(email)))
        return bool(self._session.execute(stmt).scalar())

    def exists_by_name(self, name: str) -> bool:
        stmt = select(exists().where(UserModel.name == name.strip()))
        return bool(self._session.execute(stmt).scalar())

    def list_active(self, *, limit: int = 20, offset: int = 0) -> list[UserModel]:
        stmt = (
            select(UserModel)
            .where(UserModel.deleted_at.is_(None))
            .order_by(UserModel.created_at.asc(), UserModel.name.asc())
            .limit(limit)
            .offset(offset)
        )
        return list(self._session.execute(stmt).scalars().all())

    def count_active(self) -> int:
        stmt = select(func.count(UserModel.id)).where(UserModel.deleted_at.is_(None))
        return int(self._session.execute(stmt).scalar_one())
