"""Credential Verifier — bcrypt helpers and register/authenticate against the DB.

Tests cover:
    - Hashes are salted and verify only the original password
    - Passwords beyond bcrypt's 72-byte window still hash
    - Duplicate registration is a ConflictError
    - Unknown email and wrong password raise the identical AuthError
    - The unknown-email dummy hash is computed in a worker thread
"""

import threading

import pytest

from app.core.errors import AuthError, ConflictError
from app.schemas.auth import LoginRequest, RegisterRequest
from app.services import accounts
from app.services.accounts import (
    INVALID_CREDENTIALS,
    authenticate,
    hash_password,
    register_account,
    verify_password,
)

ROUNDS = 4


# ─── password hashing ────────────────────────────────────────────

def test_hash_is_salted_and_verifiable():
    first = hash_password("secret1", ROUNDS)
    second = hash_password("secret1", ROUNDS)
    assert first != second
    assert verify_password("secret1", first)
    assert not verify_password("secret2", first)


def test_long_password_is_hashed_within_bcrypt_limit():
    password = "p" * 100
    hashed = hash_password(password, ROUNDS)
    assert verify_password(password, hashed)


def test_verify_against_corrupt_hash_is_false():
    assert verify_password("secret1", "not-a-bcrypt-hash") is False


# ─── register / authenticate ─────────────────────────────────────

async def test_register_then_authenticate(test_db):
    account = await register_account(
        test_db,
        RegisterRequest(email="Alice@Example.com", password="secret1", name="Alice"),
        ROUNDS,
    )
    assert account.email == "alice@example.com"

    logged_in = await authenticate(
        test_db, LoginRequest(email="alice@example.com", password="secret1"), ROUNDS,
    )
    assert logged_in == account


async def test_register_duplicate_email_conflicts(test_db):
    await register_account(
        test_db, RegisterRequest(email="alice@example.com", password="secret1"), ROUNDS,
    )
    with pytest.raises(ConflictError) as exc:
        await register_account(
            test_db, RegisterRequest(email="ALICE@example.com", password="other12"), ROUNDS,
        )
    assert exc.value.http_status == 409


async def test_authenticate_failures_share_one_message(test_db):
    await register_account(
        test_db, RegisterRequest(email="alice@example.com", password="secret1"), ROUNDS,
    )
    with pytest.raises(AuthError) as wrong_password:
        await authenticate(
            test_db, LoginRequest(email="alice@example.com", password="nope123"), ROUNDS,
        )
    with pytest.raises(AuthError) as unknown_email:
        await authenticate(
            test_db, LoginRequest(email="ghost@example.com", password="secret1"), ROUNDS,
        )
    assert wrong_password.value.message == unknown_email.value.message == INVALID_CREDENTIALS


async def test_unknown_email_hashes_off_the_event_loop(test_db, monkeypatch):
    hashing_threads = []

    def recording_dummy_hash(rounds):
        hashing_threads.append(threading.current_thread())
        return hash_password("placeholder", rounds)

    monkeypatch.setattr(accounts, "_dummy_hash", recording_dummy_hash)
    with pytest.raises(AuthError):
        await authenticate(
            test_db, LoginRequest(email="ghost@example.com", password="secret1"), ROUNDS,
        )
    assert len(hashing_threads) == 1
    assert hashing_threads[0] is not threading.main_thread()
