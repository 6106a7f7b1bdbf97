# ecommerce/services/user_service.py

import logging
import math
import uuid

from ecommerce.api.schemas.auth_schema import AuthenticationResponse
from ecommerce.api.schemas.user_schema import (
    AdminCreateUserRequest,
    AdminDeleteUserRequest,
    AdminUpdateUserRequest,
    UserCreateRequest,
    UserGetResponse,
    UserUpdateRequest,
)
from ecommerce.core.api_response import ApiResponse
from ecommerce.core.error_codes import ErrorCode, ResponseStatus
from ecommerce.core.result import Err, Ok, Result
from ecommerce.entities.role import Role
from ecommerce.infrastructure.security.password_hasher import PasswordHasher
from ecommerce.mappers.user_mapper import UserMapper
from ecommerce.repositories.user_repository import UserRepository, normalize_email
from ecommerce.services.auth_service import AuthService

logger = logging.getLogger(__name__)

USER_NAME_PREFIX = "user_"


def generate_user_name() -> str:
    return USER_NAME_PREFIX + uuid.uuid4().hex[:8]


class UserService:
    def __init__(
        self,
        *,
        user_repository: UserRepository,
        user_mapper: UserMapper,
        password_hasher: PasswordHasher,
        auth_service: AuthService,
    ) -> None:
        self._user_repository = user_repository
        self._user_mapper = user_mapper
        self._password_hasher = password_hasher
        self._auth_service = auth_service

    # -------------------------
    # Self service
    # -------------------------

    def sign_up(self, request: UserCreateRequest) -> Result[ApiResponse[AuthenticationResponse]]:
        if err := self.check_email_unique(request.email):
            return err
        if err := self.check_password_confirm(request.password, request.confirm_password):
            return err

        user = self._user_mapper.user_create_dto_to_entity(request)
        self._password_hasher.apply_to(user, request.password)
        user.name = self._unique_generated_name()
        user.role = Role.USER
        self._user_repository.save(user)
        logger.info("user %s signed up as %s", user.id, user.name)

        auth = self._auth_service.authenticate(email=user.email, password=request.password)
        if isinstance(auth, Err):
            return auth
        return Ok(auth.value.model_copy(update={"message": ResponseStatus.SUCCESS_SIGNUP.message}))

    def update_user_detail(self, request: UserUpdateRequest, *, current_email: str) -> Result[ApiResponse[None]]:
        user = self._user_repository.get_by_email(current_email)
        if user is None:
            return self._reject(ErrorCode.USER_NOT_FOUND, "update_user_detail", current_email)

        if err := self._check_identity_changes(user, name=request.name, email=request.email):
            return err

        new_password = None
        if request.old_password is not None:
            if not self._password_hasher.verify_user(request.old_password, user):
                return self._reject(ErrorCode.PASSWORD_INCORRECT, "update_user_detail", user.id)
            if request.new_password is None:
                return Err(ErrorCode.NEW_PASSWORD_CANNOT_BE_NULL)
            if request.confirm_password is None:
                return Err(ErrorCode.CONFIRM_PASSWORD_CANNOT_BE_NULL)
            if request.new_password == request.old_password:
                return Err(ErrorCode.PASSWORD_SHOULD_NOT_MATCH_OLD)
            if err := self.check_password_confirm(request.new_password, request.confirm_password):
                return err
            new_password = request.new_password

        user = self._user_mapper.user_update_dto_to_entity(user, request)
        if new_password is not None:
            self._password_hasher.apply_to(user, new_password)
        self._user_repository.save(user)
        logger.info("user %s updated own profile (password changed: %s)", user.id, new_password is not None)

        return Ok(ApiResponse[None](message=ResponseStatus.SUCCESS_UPDATE.message))

    def get_me(self, *, current_email: str) -> Result[ApiResponse[UserGetResponse]]:
        user = self._user_repository.get_by_email(current_email)
        if user is None:
            return self._reject(ErrorCode.UNAUTHENTICATED, "get_me", current_email)
        return Ok(ApiResponse[UserGetResponse](result=self._user_mapper.user_entity_to_user_get_response(user)))

    # -------------------------
    # Admin
    # -------------------------

    def admin_sign_up(self, request: AdminCreateUserRequest) -> Result[ApiResponse[None]]:
        if err := self.check_email_unique(request.email):
            return err
        if err := self.check_password_confirm(request.new_password, request.confirm_password):
            return err

        user = self._user_mapper.admin_create_user_dto_to_entity(request)
        self._password_hasher.apply_to(user, request.new_password)
        user.name = self._unique_generated_name()
        user.role = Role.from_request(request.role)
        self._user_repository.save(user)
        logger.info("admin created user %s with role %s", user.id, user.role.value)

        return Ok(ApiResponse[None](message=ResponseStatus.SUCCESS_SIGNUP.message))

    def admin_update_user_detail(self, request: AdminUpdateUserRequest, user_id: str) -> Result[ApiResponse[None]]:
        user = self._user_repository.get_by_id(user_id)
        if user is None:
            return self._reject(ErrorCode.USER_NOT_FOUND, "admin_update_user_detail", user_id)

        if err := self._check_identity_changes(user, name=request.name, email=request.email):
            return err

        if request.new_password is not None:
            if request.confirm_password is None:
                return Err(ErrorCode.CONFIRM_PASSWORD_CANNOT_BE_NULL)
            if err := self.check_password_confirm(request.new_password, request.confirm_password):
                return err

        user = self._user_mapper.admin_update_user_dto_to_entity(user, request)
        if request.new_password is not None:
            self._password_hasher.apply_to(user, request.new_password)
        user.role = Role.from_request(request.role)
        self._user_repository.save(user)
        logger.info("admin updated user %s (role %s)", user.id, user.role.value)

        return Ok(ApiResponse[None](message=ResponseStatus.SUCCESS_UPDATE.message))

    def admin_delete_user(self, request: AdminDeleteUserRequest) -> Result[ApiResponse[None]]:
        # stops at the first unknown id; earlier deletions stay on the session
        # and are discarded by the caller's rollback. Repeated ids count once.
        names: list[str] = []
        for user_id in dict.fromkeys(request.ids):
            user = self._user_repository.get_by_id(user_id)
            if user is None:
                return self._reject(ErrorCode.USER_NOT_FOUND, "admin_delete_user", user_id)
            user.soft_delete()
            self._user_repository.save(user)
            names.append(user.name)

        logger.info("admin soft-deleted %d user(s): %s", len(names), " ".join(names))
        return Ok(ApiResponse[None](message=ResponseStatus.SUCCESS_DELETE.formatted_message(" ".join(names))))

    def admin_list_users(self, *, page: int = 1, size: int = 20) -> Result[ApiResponse[list[UserGetResponse]]]:
        page = max(page, 1)
        size = min(max(size, 1), 100)

        total = self._user_repository.count_active()
        users = self._user_repository.list_active(limit=size, offset=(page - 1) * size)

        return Ok(
            ApiResponse[list[UserGetResponse]](
                total_pages=math.ceil(total / size),
                result=[self._user_mapper.user_entity_to_user_get_response(u) for u in users],
            )
        )

    # -------------------------
    # Validation helpers
    # -------------------------

    def check_email_unique(self, email: str) -> Err | None:
        if self._user_repository.exists_by_email(email):
            return self._reject(ErrorCode.EMAIL_EXISTED, "check_email_unique", email)
        return None

    def check_name_unique(self, name: str) -> Err | None:
        if self._user_repository.exists_by_name(name):
            return self._reject(ErrorCode.USERNAME_ALREADY_EXISTS, "check_name_unique", name)
        return None

    @staticmethod
    def check_password_confirm(new_password: str, confirm_password: str) -> Err | None:
        if new_password != confirm_password:
            return Err(ErrorCode.CONFIRM_PASSWORD_NOT_MATCH)
        return None

    def _check_identity_changes(self, user, *, name: str | None, email: str | None) -> Err | None:
        # keeping your own name or email is not a conflict
        if name is not None and name.strip() != user.name:
            if err := self.check_name_unique(name):
                return err
        if email is not None and normalize_email(email) != user.email:
            if err := self.check_email_unique(email):
                return err
        return None

    def _unique_generated_name(self) -> str:
        name = generate_user_name()
        while self._user_repository.exists_by_name(name):
            name = generate_user_name()
        return name

    @staticmethod
    def _reject(code: ErrorCode, operation: str, subject: object) -> Err:
        logger.info("%s rejected for %s: %s", operation, subject, code.name)
        return Err(code)
