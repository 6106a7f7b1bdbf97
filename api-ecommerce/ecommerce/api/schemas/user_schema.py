# ecommerce/api/schemas/user_schema.py
from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import ConfigDict, EmailStr, Field, StringConstraints

from ecommerce.api.schemas._base import CamelModel
from ecommerce.entities.role import Role

UserName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=100)]


class UserCreateRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=200)
    confirm_password: str = Field(max_length=200)


class AdminCreateUserRequest(CamelModel):
    email: EmailStr
    new_password: str = Field(min_length=8, max_length=200)
    confirm_password: str = Field(max_length=200)
    role: str | None = None


class UserUpdateRequest(CamelModel):
    name: UserName | None = None
    email: EmailStr | None = None
    old_password: str | None = Field(default=None, max_length=200)
    new_password: str | None = Field(default=None, min_length=8, max_length=200)
    confirm_password: str | None = Field(default=None, max_length=200)


class AdminUpdateUserRequest(CamelModel):
    name: UserName | None = None
    email: EmailStr | None = None
    new_password: str | None = Field(default=None, min_length=8, max_length=200)
    confirm_password: str | None = Field(default=None, max_length=200)
    role: str | None = None


class AdminDeleteUserRequest(CamelModel):
    ids: list[str] = Field(min_length=1)


class UserGetResponse(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    email: EmailStr
    role: Role
    created_at: datetime | None = None
    updated_at: datetime | None = None
