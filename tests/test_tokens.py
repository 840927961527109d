from datetime import timedelta

import pytest

from stayvista.config import cookie_options
from stayvista.utils.dependencies import (
    InvalidTokenError,
    create_access_token,
    decode_access_token,
)


def test_issued_token_round_trips_claims():
    token = create_access_token({"email": "alice@example.com", "role": "guest"})

    claims = decode_access_token(token)

    assert claims["email"] == "alice@example.com"
    assert claims["role"] == "guest"
    assert "exp" in claims


def test_default_expiry_is_a_year_out():
    token = create_access_token({"email": "alice@example.com"})
    short = create_access_token({"email": "alice@example.com"}, timedelta(days=364))

    assert decode_access_token(token)["exp"] > decode_access_token(short)["exp"]


def test_token_signed_with_other_secret_is_rejected():
    token = create_access_token({"email": "alice@example.com"}, secret_key="other")

    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_expired_token_is_rejected():
    token = create_access_token({"email": "alice@example.com"}, timedelta(seconds=-10))

    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


@pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
def test_missing_or_malformed_token_is_rejected(token):
    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_cookie_options_follow_deployment_mode():
    assert cookie_options(production=True) == {
        "httponly": True,
        "secure": True,
        "samesite": "none",
    }
    assert cookie_options(production=False) == {
        "httponly": True,
        "secure": False,
        "samesite": "strict",
    }
