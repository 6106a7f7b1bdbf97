# ecommerce/api/responses.py

from flask import jsonify
from sqlalchemy.orm import Session

from ecommerce.core.api_response import ApiResponse
from ecommerce.core.result import Result


def rollback_on_error(session: Session, result: Result) -> Result:
    # an Err must not commit whatever the service already flushed
    if not result.is_ok:
        session.rollback()
    return result


def to_http_response(result: Result):
    body: ApiResponse = result.value if result.is_ok else ApiResponse.from_error(result.error)
    return jsonify(body.to_dict()), body.code
