"""Credential Verifier — registration, login and bcrypt password handling.

Invariants:
    - Plaintext passwords are never stored, logged or returned
    - Login failure is ONE message for unknown email and wrong password
    - Unknown emails still pay for a bcrypt comparison (dummy hash), so timing
      does not reveal which accounts exist
    - bcrypt runs in a worker thread: it is CPU-bound and deliberately slow
    - Email uniqueness: pre-check plus the unique index (a lost race is still 409)
"""

import asyncio
import logging
import uuid
from functools import lru_cache

import bcrypt
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import AccountView
from app.core.errors import AuthError, ConflictError
from app.infrastructure.database import translate_db_errors
from app.models.account import Account
from app.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
EMAIL_TAKEN = "Email already registered"
BCRYPT_MAX_BYTES = 72


# ─── Password hashing ────────────────────────────────────────────

def _password_bytes(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes; newer releases raise instead of truncating
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """Salted one-way bcrypt hash."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(
            _password_bytes(password), password_hash.encode("utf-8"),
        )
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


@lru_cache
def _dummy_hash(rounds: int) -> str:
    return hash_password(uuid.uuid4().hex, rounds)


def _verify_unknown_account(password: str, rounds: int) -> bool:
    """Equal-cost comparison for an email with no account. Runs off the event loop."""
    return verify_password(password, _dummy_hash(rounds))


# ─── Account operations ──────────────────────────────────────────

async def register_account(
    db: AsyncSession, payload: RegisterRequest, rounds: int = 10,
) -> AccountView:
    """Create an account for a not-yet-registered (lower-cased) email."""
    async with translate_db_errors("register.lookup", "Registration failed"):
        existing = await db.execute(
            select(Account.id).where(Account.email == payload.email),
        )
        taken = existing.first() is not None
    if taken:
        raise ConflictError(EMAIL_TAKEN)

    password_hash = await asyncio.to_thread(
        hash_password, payload.password, rounds,
    )
    account = Account(
        id=uuid.uuid4(),
        email=payload.email,
        password_hash=password_hash,
        name=payload.name,
    )
    async with translate_db_errors("register.insert", "Registration failed"):
        db.add(account)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise ConflictError(EMAIL_TAKEN) from None

    logger.info("Account registered", extra={"user_id": str(account.id)})
    return AccountView(id=str(account.id), email=account.email, name=account.name)


async def authenticate(
    db: AsyncSession, payload: LoginRequest, rounds: int = 10,
) -> AccountView:
    """Check email + password; AuthError(INVALID_CREDENTIALS) on any mismatch."""
    async with translate_db_errors("login.lookup", "Login failed"):
        result = await db.execute(
            select(Account).where(Account.email == payload.email),
        )
        account = result.scalar_one_or_none()

    if account is None:
        await asyncio.to_thread(
            _verify_unknown_account, payload.password, rounds,
        )
        logger.info("Login rejected")
        raise AuthError(INVALID_CREDENTIALS)

    ok = await asyncio.to_thread(
        verify_password, payload.password, account.password_hash,
    )
    if not ok:
        logger.info("Login rejected", extra={"user_id": str(account.id)})
        raise AuthError(INVALID_CREDENTIALS)

    return AccountView(id=str(account.id), email=account.email, name=account.name)
