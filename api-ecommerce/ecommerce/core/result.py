# ecommerce/core/result.py
"""Tagged success/failure values returned by the service layer.

Services return ``Ok(value)`` or ``Err(code)`` instead of raising for
precondition failures, so callers branch on the tag::

    result = service.get_me(current_email=email)
    if not result.is_ok:
        ...
"""
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from ecommerce.core.error_codes import ErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: ErrorCode

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message


Result = Union[Ok[T], Err]
