# ecommerce/core/exceptions.py

from ecommerce.core.error_codes import ErrorCode


class AppError(Exception):
    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        super().__init__(message or code.message)
        self.code = code
        self.status_code = code.status_code


class UnauthorizedError(AppError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(ErrorCode.UNAUTHENTICATED, message)


class InvalidTokenError(AppError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(ErrorCode.INVALID_TOKEN, message)


class ForbiddenError(AppError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(ErrorCode.FORBIDDEN, message)
