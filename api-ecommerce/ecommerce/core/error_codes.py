# ecommerce/core/error_codes.py
from enum import Enum


class ErrorCode(Enum):
    EMAIL_EXISTED = ("Email already existed", 409)
    USERNAME_ALREADY_EXISTS = ("Username already exists", 409)
    CONFIRM_PASSWORD_NOT_MATCH = ("Confirm password does not match", 400)
    PASSWORD_INCORRECT = ("Password is incorrect", 400)
    NEW_PASSWORD_CANNOT_BE_NULL = ("New password cannot be null", 400)
    CONFIRM_PASSWORD_CANNOT_BE_NULL = ("Confirm password cannot be null", 400)
    PASSWORD_SHOULD_NOT_MATCH_OLD = ("New password should not match the old password", 400)
    USER_NOT_FOUND = ("User not found", 404)
    UNAUTHENTICATED = ("Unauthenticated", 401)
    FORBIDDEN = ("You do not have permission", 403)
    INVALID_TOKEN = ("Invalid or expired token", 401)
    INVALID_REQUEST = ("Invalid request", 400)
    INTERNAL_ERROR = ("Internal server error", 500)

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code


class ResponseStatus(Enum):
    SUCCESS_SIGNUP = "Sign up successfully"
    SUCCESS_UPDATE = "Update successfully"
    SUCCESS_DELETE = "Delete successfully: %s"

    @property
    def message(self) -> str:
        return self.value

    def formatted_message(self, *args: object) -> str:
        return self.value % args
