# ecommerce/api/routes/user_routes.py

from __future__ import annotations

from flask import Blueprint, request

from ecommerce.api.dependencies import build_user_service
from ecommerce.api.middlewares.auth_middleware import current_email, require_auth, require_roles
from ecommerce.api.responses import rollback_on_error, to_http_response
from ecommerce.api.schemas.user_schema import (
    AdminCreateUserRequest,
    AdminDeleteUserRequest,
    AdminUpdateUserRequest,
    UserCreateRequest,
    UserUpdateRequest,
)
from ecommerce.entities.role import Role
from ecommerce.infrastructure.database.session import db_session

bp_users = Blueprint("users", __name__, url_prefix="/users")


def _json_body() -> dict:
    return request.get_json(force=True) or {}


# -------------------------
# Public
# -------------------------

@bp_users.post("/signup")
def sign_up():
    payload = UserCreateRequest.model_validate(_json_body())

    with db_session() as session:
        result = rollback_on_error(session, build_user_service(session).sign_up(payload))

    return to_http_response(result)


# -------------------------
# My account
# -------------------------

@bp_users.get("/me")
@require_auth
def get_me():
    with db_session() as session:
        result = build_user_service(session).get_me(current_email=current_email())

    return to_http_response(result)


@bp_users.put("/me")
@require_auth
def update_me():
    payload = UserUpdateRequest.model_validate(_json_body())

    with db_session() as session:
        service = build_user_service(session)
        result = rollback_on_error(session, service.update_user_detail(payload, current_email=current_email()))

    return to_http_response(result)


# -------------------------
# ADMIN
# -------------------------

@bp_users.get("/admin")
@require_auth
@require_roles(Role.ADMIN.value)
def admin_list_users():
    page = request.args.get("page", 1, type=int)
    size = request.args.get("size", 20, type=int)

    with db_session() as session:
        result = build_user_service(session).admin_list_users(page=page, size=size)

    return to_http_response(result)


@bp_users.post("/admin")
@require_auth
@require_roles(Role.ADMIN.value)
def admin_create_user():
    payload = AdminCreateUserRequest.model_validate(_json_body())

    with db_session() as session:
        result = rollback_on_error(session, build_user_service(session).admin_sign_up(payload))

    return to_http_response(result)


@bp_users.put("/admin/<user_id>")
@require_auth
@require_roles(Role.ADMIN.value)
def admin_update_user(user_id: str):
    payload = AdminUpdateUserRequest.model_validate(_json_body())

    with db_session() as session:
        service = build_user_service(session)
        result = rollback_on_error(session, service.admin_update_user_detail(payload, user_id))

    return to_http_response(result)


@bp_users.delete("/admin")
@require_auth
@require_roles(Role.ADMIN.value)
def admin_delete_users():
    payload = AdminDeleteUserRequest.model_validate(_json_body())

    with db_session() as session:
        result = rollback_on_error(session, build_user_service(session).admin_delete_user(payload))

    return to_http_response(result)
