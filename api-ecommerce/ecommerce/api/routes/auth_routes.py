from flask import Blueprint, request

from ecommerce.api.dependencies import build_auth_service
from ecommerce.api.middlewares.auth_middleware import get_bearer_token, require_auth
from ecommerce.api.responses import to_http_response
from ecommerce.api.schemas.auth_schema import AuthenticationRequest
from ecommerce.core.api_response import ApiResponse
from ecommerce.core.result import Ok
from ecommerce.infrastructure.database.session import db_session

bp_auth = Blueprint("auth", __name__, url_prefix="/auth")


@bp_auth.post("/login")
def login():
    payload = AuthenticationRequest.model_validate(request.get_json(force=True) or {})

    with db_session() as session:
        result = build_auth_service(session).authenticate(email=payload.email, password=payload.password)

    return to_http_response(result)


@bp_auth.post("/logout")
@require_auth
def logout():
    token = get_bearer_token()

    with db_session() as session:
        build_auth_service(session).revoke_access_token(token=token, reason="logout")

    return to_http_response(Ok(ApiResponse[None](message="Logout successfully")))
