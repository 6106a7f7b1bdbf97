# ecommerce/infrastructure/database/models/user_model.py

from sqlalchemy import Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ecommerce.entities.role import Role
from ecommerce.infrastructure.database.base_model import BaseEntity, BaseModel


class UserModel(BaseEntity, BaseModel):
    __tablename__ = "tbUsers"

    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)

    password_algo: Mapped[str] = mapped_column(String(50), nullable=False)
    password_iterations: Mapped[int] = mapped_column(nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    password_salt: Mapped[str] = mapped_column(Text, nullable=False)

    role: Mapped[Role] = mapped_column(
        Enum(Role, name="user_role", native_enum=False, length=20),
        nullable=False,
        default=Role.USER,
    )

    def __repr__(self) -> str:
        return f"<UserModel id={self.id} name={self.name!r} role={self.role}>"
