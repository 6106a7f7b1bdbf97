# ecommerce/api/schemas/auth_schema.py
from pydantic import EmailStr, Field

from ecommerce.api.schemas._base import CamelModel


class AuthenticationRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=200)


class AuthenticationResponse(CamelModel):
    access_token: str
    token_type: str = "Bearer"
    expires_in: int
    authenticated: bool = True
