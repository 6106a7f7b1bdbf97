from functools import wraps
from typing import Any, Callable, TypeVar

from flask import g, request

from ecommerce.api.dependencies import build_auth_service
from ecommerce.core.exceptions import ForbiddenError, InvalidTokenError, UnauthorizedError
from ecommerce.infrastructure.database.session import db_session
from ecommerce.infrastructure.security.jwt_provider import JwtProvider
from ecommerce.repositories.user_repository import UserRepository

F = TypeVar("F", bound=Callable[..., Any])


def get_bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    parts = auth.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    raise UnauthorizedError("Missing bearer token")


def current_email() -> str:
    return str(g.auth["email"])


def require_auth(fn: F) -> F:
    @wraps(fn)
    def wrapper(*args, **kwargs):
        token = get_bearer_token()
        claims = JwtProvider().decode(token)

        if claims.get("typ") != "access" or not claims.get("sub"):
            raise InvalidTokenError()

        with db_session() as session:
            if build_auth_service(session).is_token_revoked(jti=str(claims.get("jti"))):
                raise InvalidTokenError("Token revoked")

            user = UserRepository(session).get_by_id(str(claims["sub"]))
            if user is None:
                raise UnauthorizedError("User no longer active")

            # email and role come from the stored user, not the token
            g.auth = {**claims, "email": user.email, "role": user.role.value}

        return fn(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def require_roles(*allowed_roles: str):
    def decorator(fn: F) -> F:
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if not hasattr(g, "auth"):
                raise UnauthorizedError("Missing bearer token")

            if g.auth.get("role") not in set(allowed_roles):
                raise ForbiddenError()

            return fn(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
