# ecommerce/entities/role.py
from enum import Enum


class Role(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def from_request(cls, value: str | None) -> "Role":
        # only an exact "ADMIN" grants admin; anything else falls back to USER
        return cls.ADMIN if value == cls.ADMIN.value else cls.USER
