"""Token Service — issue/verify round trip and every rejection path.

Tests cover:
    - Round trip yields the same identity and email
    - Expiry is exactly 7 days after issuance by default
    - Expired, tampered, foreign-secret, unsigned and malformed tokens all fail
      with the same AuthError message
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from app.core.errors import AuthError
from app.services.tokens import INVALID_TOKEN_MESSAGE, TokenService

SECRET = "unit-test-secret-0123456789abcdef0123456789"


@pytest.fixture
def tokens():
    return TokenService(SECRET)


def test_round_trip_preserves_identity(tokens):
    account_id = str(uuid4())
    user = tokens.verify(tokens.issue(account_id, "alice@example.com"))
    assert user.id == account_id
    assert user.email == "alice@example.com"


def test_expiry_is_seven_days_after_issue(tokens):
    token = tokens.issue(str(uuid4()), "a@b.co")
    claims = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())


def test_expired_token_is_rejected(tokens):
    token = tokens.issue(
        str(uuid4()), "a@b.co",
        now=datetime.now(timezone.utc) - timedelta(days=7, seconds=5),
    )
    with pytest.raises(AuthError) as exc:
        tokens.verify(token)
    assert exc.value.message == INVALID_TOKEN_MESSAGE


def test_token_from_other_secret_is_rejected(tokens):
    other = TokenService("another-secret-0123456789abcdef0123456789")
    with pytest.raises(AuthError):
        tokens.verify(other.issue(str(uuid4()), "a@b.co"))


def test_tampered_token_is_rejected(tokens):
    token = tokens.issue(str(uuid4()), "a@b.co")
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])
    with pytest.raises(AuthError):
        tokens.verify(tampered)


def test_unsigned_token_is_rejected(tokens):
    unsigned = jwt.encode(
        {"sub": str(uuid4()), "email": "a@b.co",
         "exp": datetime.now(timezone.utc) + timedelta(days=1)},
        key=None, algorithm="none",
    )
    with pytest.raises(AuthError):
        tokens.verify(unsigned)


@pytest.mark.parametrize("claims", [
    {"sub": "not-a-uuid", "email": "a@b.co"},
    {"sub": str(uuid4())},
    {"email": "a@b.co"},
])
def test_token_with_bad_claims_is_rejected(tokens, claims):
    claims = {**claims, "exp": datetime.now(timezone.utc) + timedelta(days=1)}
    token = jwt.encode(claims, SECRET, algorithm="HS256")
    with pytest.raises(AuthError) as exc:
        tokens.verify(token)
    assert exc.value.message == INVALID_TOKEN_MESSAGE


def test_token_without_expiry_is_rejected(tokens):
    token = jwt.encode({"sub": str(uuid4()), "email": "a@b.co"}, SECRET, algorithm="HS256")
    with pytest.raises(AuthError):
        tokens.verify(token)


@pytest.mark.parametrize("token", ["", "abc", "a.b.c"])
def test_malformed_token_is_rejected(tokens, token):
    with pytest.raises(AuthError):
        tokens.verify(token)


def test_empty_secret_is_refused():
    with pytest.raises(ValueError):
        TokenService("")
