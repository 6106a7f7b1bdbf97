# ecommerce/infrastructure/database/models/revoked_token_model.py

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ecommerce.infrastructure.database.base_model import BaseEntity, BaseModel


class RevokedTokenModel(BaseEntity, BaseModel):
    __tablename__ = "tbRevokedTokens"

    jti: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("tbUsers.id"), nullable=False)

    revoked_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    reason: Mapped[str | None] = mapped_column(String(100), nullable=True)
