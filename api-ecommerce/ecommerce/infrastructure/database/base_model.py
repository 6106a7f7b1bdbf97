# ecommerce/infrastructure/database/base_model.py

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Uuid
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, validates


def utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class BaseModel(DeclarativeBase):
    pass


class BaseEntity:
    """Identity and audit columns shared by every persisted record.

    ``created_at`` is written once. ``deleted_at`` marks a soft delete and is
    never cleared once set; ``is_deleted`` is derived from it.
    """

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    @hybrid_property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @is_deleted.inplace.expression
    @classmethod
    def _is_deleted_expression(cls):
        return cls.deleted_at.is_not(None)

    @validates("created_at")
    def _validate_created_at(self, key: str, value: datetime) -> datetime:
        if self.created_at is not None and value != self.created_at:
            raise ValueError("created_at cannot be changed once set")
        return value

    @validates("deleted_at")
    def _validate_deleted_at(self, key: str, value: datetime | None) -> datetime | None:
        if self.deleted_at is not None and value is None:
            raise ValueError("deleted_at cannot be cleared once set")
        return value

    def soft_delete(self, when: datetime | None = None) -> None:
        if self.deleted_at is None:
            self.deleted_at = when or utcnow()
