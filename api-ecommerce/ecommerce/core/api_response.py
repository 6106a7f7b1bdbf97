# ecommerce/core/api_response.py
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ecommerce.core.error_codes import ErrorCode

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    code: int = 200
    message: str | None = None
    total_pages: int | None = None
    result: T | None = None

    @classmethod
    def from_error(cls, code: ErrorCode, *, message: str | None = None, result: Any = None) -> "ApiResponse":
        return cls(code=code.status_code, message=message or code.message, result=result)

    def to_dict(self) -> dict:
        # absent fields are dropped, not serialized as null
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
