# ecommerce/api/middlewares/error_handler.py
import logging

from flask import Flask, jsonify
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from ecommerce.config.settings import settings
from ecommerce.core.api_response import ApiResponse
from ecommerce.core.error_codes import ErrorCode
from ecommerce.core.exceptions import AppError

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    def handle_app_error(err: AppError):
        body = ApiResponse.from_error(err.code, message=str(err))
        return jsonify(body.to_dict()), err.status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        details = err.errors(include_url=False, include_context=False, include_input=False)
        body = ApiResponse.from_error(ErrorCode.INVALID_REQUEST, result=details)
        return jsonify(body.to_dict()), body.code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        body = ApiResponse(code=err.code or 500, message=err.description)
        return jsonify(body.to_dict()), body.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        logger.exception("unhandled error")

        message = str(err) if settings.debug else None
        body = ApiResponse.from_error(ErrorCode.INTERNAL_ERROR, message=message)
        return jsonify(body.to_dict()), body.code
