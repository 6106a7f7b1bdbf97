# ecommerce/infrastructure/security/jwt_provider.py

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt

from ecommerce.config.settings import settings
from ecommerce.core.exceptions import InvalidTokenError


class JwtProvider:
    def __init__(
        self,
        *,
        secret: str | None = None,
        issuer: str | None = None,
        audience: str | None = None,
        access_minutes: int | None = None,
    ) -> None:
        self._secret = secret or settings.jwt_secret
        self._issuer = issuer or settings.jwt_issuer
        self._audience = audience or settings.jwt_audience
        self._access_minutes = access_minutes or settings.jwt_access_minutes
        self._algorithm = "HS256"

    @property
    def access_minutes(self) -> int:
        return self._access_minutes

    def issue_token(self, *, subject: str, payload: dict, minutes: int, token_type: str) -> str:
        now = datetime.now(tz=timezone.utc)
        exp = now + timedelta(minutes=minutes)

        claims = {
            "iss": self._issuer,
            "aud": self._audience,
            "sub": str(subject),
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
            "jti": uuid4().hex,
            "typ": token_type,
        }
        claims.update(payload)
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def issue_access_token(self, *, subject: str, payload: dict, minutes: int = 0) -> str:
        ttl = minutes if minutes and minutes > 0 else self._access_minutes
        return self.issue_token(subject=subject, payload=payload, minutes=ttl, token_type="access")

    def decode(self, token: str) -> dict:
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["exp", "iat", "sub", "jti", "typ"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError("Invalid token") from e
