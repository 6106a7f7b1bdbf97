# ecommerce/api/dependencies.py
"""Per-request wiring of services onto a database session."""

from sqlalchemy.orm import Session

from ecommerce.config.settings import settings
from ecommerce.infrastructure.security.jwt_provider import JwtProvider
from ecommerce.infrastructure.security.password_hasher import PasswordHasher
from ecommerce.mappers.user_mapper import UserMapper
from ecommerce.repositories.revoked_token_repository import RevokedTokenRepository
from ecommerce.repositories.user_repository import UserRepository
from ecommerce.services.auth_service import AuthService
from ecommerce.services.user_service import UserService


def build_auth_service(session: Session, *, hasher: PasswordHasher | None = None) -> AuthService:
    return AuthService(
        jwt_provider=JwtProvider(),
        user_repo=UserRepository(session),
        revoked_repo=RevokedTokenRepository(session),
        hasher=hasher or PasswordHasher(settings.password_iterations),
    )


def build_user_service(session: Session) -> UserService:
    hasher = PasswordHasher(settings.password_iterations)
    return UserService(
        user_repository=UserRepository(session),
        user_mapper=UserMapper(),
        password_hasher=hasher,
        auth_service=build_auth_service(session, hasher=hasher),
    )
