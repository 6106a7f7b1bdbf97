# ecommerce/services/auth_service.py

import logging
import uuid
from datetime import datetime, timezone

from ecommerce.api.schemas.auth_schema import AuthenticationResponse
from ecommerce.core.api_response import ApiResponse
from ecommerce.core.error_codes import ErrorCode
from ecommerce.core.exceptions import InvalidTokenError
from ecommerce.core.result import Err, Ok, Result
from ecommerce.infrastructure.database.models.revoked_token_model import RevokedTokenModel
from ecommerce.infrastructure.security.jwt_provider import JwtProvider
from ecommerce.infrastructure.security.password_hasher import PasswordHasher
from ecommerce.repositories.revoked_token_repository import RevokedTokenRepository
from ecommerce.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self,
        *,
        jwt_provider: JwtProvider,
        user_repo: UserRepository,
        revoked_repo: RevokedTokenRepository,
        hasher: PasswordHasher,
    ) -> None:
        self._jwt = jwt_provider
        self._user_repo = user_repo
        self._revoked_repo = revoked_repo
        self._hasher = hasher

    def authenticate(self, *, email: str, password: str) -> Result[ApiResponse[AuthenticationResponse]]:
        user = self._user_repo.get_by_email(email)
        if user is None or not self._hasher.verify_user(password, user):
            logger.info("authentication rejected for %s", email)
            return Err(ErrorCode.UNAUTHENTICATED)

        token = self._jwt.issue_access_token(
            subject=str(user.id),
            payload={"email": user.email, "name": user.name, "role": user.role.value},
        )
        response = AuthenticationResponse(access_token=token, expires_in=self._jwt.access_minutes * 60)
        return Ok(ApiResponse[AuthenticationResponse](result=response))

    def revoke_access_token(self, *, token: str, reason: str | None = None) -> None:
        claims = self._jwt.decode(token)
        jti = claims.get("jti")
        sub = claims.get("sub")
        exp = claims.get("exp")

        if not jti or not sub or not exp:
            raise InvalidTokenError()

        if self._revoked_repo.is_revoked(str(jti)):
            return

        try:
            user_id = uuid.UUID(str(sub))
        except ValueError as e:
            raise InvalidTokenError() from e

        self._revoked_repo.save(
            RevokedTokenModel(
                jti=str(jti),
                user_id=user_id,
                revoked_at=datetime.now(tz=timezone.utc),
                expires_at=datetime.fromtimestamp(int(exp), tz=timezone.utc),
                reason=reason,
            )
        )
        logger.info("access token %s revoked (%s)", jti, reason or "no reason")

    def is_token_revoked(self, *, jti: str) -> bool:
        return self._revoked_repo.is_revoked(jti)
