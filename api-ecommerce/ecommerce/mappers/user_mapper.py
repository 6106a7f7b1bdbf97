# ecommerce/mappers/user_mapper.py

from ecommerce.api.schemas.user_schema import (
    AdminCreateUserRequest,
    AdminUpdateUserRequest,
    UserCreateRequest,
    UserGetResponse,
    UserUpdateRequest,
)
from ecommerce.infrastructure.database.models.user_model import UserModel
from ecommerce.repositories.user_repository import normalize_email


class UserMapper:
    """Structural DTO <-> entity conversions. Passwords and roles are left to the service."""

    def user_create_dto_to_entity(self, dto: UserCreateRequest) -> UserModel:
        return UserModel(email=normalize_email(dto.email))

    def admin_create_user_dto_to_entity(self, dto: AdminCreateUserRequest) -> UserModel:
        return UserModel(email=normalize_email(dto.email))

    def user_update_dto_to_entity(self, user: UserModel, dto: UserUpdateRequest) -> UserModel:
        return self._merge(user, name=dto.name, email=dto.email)

    def admin_update_user_dto_to_entity(self, user: UserModel, dto: AdminUpdateUserRequest) -> UserModel:
        return self._merge(user, name=dto.name, email=dto.email)

    def user_entity_to_user_get_response(self, user: UserModel) -> UserGetResponse:
        return UserGetResponse(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def _merge(user: UserModel, *, name: str | None, email: str | None) -> UserModel:
        if name is not None:
            user.name = name.strip()
        if email is not None:
            user.email = normalize_email(email)
        return user
