from flask import Blueprint, jsonify
from sqlalchemy import text

from ecommerce.core.api_response import ApiResponse
from ecommerce.infrastructure.database.session import db_session

bp_health = Blueprint("health", __name__, url_prefix="/health")


@bp_health.get("")
def health():
    return jsonify(ApiResponse[dict](result={"status": "ok"}).to_dict()), 200


@bp_health.get("/db")
def health_db():
    with db_session() as session:
        session.execute(text("select 1"))
    return jsonify(ApiResponse[dict](result={"db": "ok"}).to_dict()), 200
