import pytest

from ecommerce.core.exceptions import InvalidTokenError
from ecommerce.infrastructure.security.jwt_provider import JwtProvider


def _provider(**kwargs):
    return JwtProvider(secret="unit-secret", issuer="unit-issuer", audience="unit-audience", **kwargs)


def test_access_token_round_trip():
    provider = _provider()

    token = provider.issue_access_token(subject="abc", payload={"email": "a@shop.io", "role": "USER"})
    claims = provider.decode(token)

    assert claims["sub"] == "abc"
    assert claims["typ"] == "access"
    assert claims["email"] == "a@shop.io"
    assert claims["role"] == "USER"
    assert claims["exp"] - claims["iat"] == provider.access_minutes * 60


def test_expired_token_is_rejected():
    provider = _provider()
    token = provider.issue_token(subject="abc", payload={}, minutes=-5, token_type="access")

    with pytest.raises(InvalidTokenError, match="expired"):
        provider.decode(token)


def test_foreign_secret_is_rejected():
    token = JwtProvider(secret="other-secret", issuer="unit-issuer", audience="unit-audience").issue_access_token(
        subject="abc", payload={}
    )

    with pytest.raises(InvalidTokenError, match="Invalid"):
        _provider().decode(token)


def test_wrong_audience_is_rejected():
    token = JwtProvider(secret="unit-secret", issuer="unit-issuer", audience="elsewhere").issue_access_token(
        subject="abc", payload={}
    )

    with pytest.raises(InvalidTokenError):
        _provider().decode(token)
