"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - AccountId wraps the UUID of a users row
    - AuthenticatedUser.id is the canonical (lower-case, hyphenated) UUID string
    - MOOD_MIN..MOOD_MAX is the single source of truth for the mood range

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost, full type-checker support
    - AuthenticatedUser frozen: the identity resolved from a token is never edited downstream
"""

from dataclasses import dataclass
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

AccountId = NewType("AccountId", UUID)
JournalEntryId = NewType("JournalEntryId", int)
ContactId = NewType("ContactId", int)


# ─── Value Bounds ────────────────────────────────────────────────

MOOD_MIN: int = 1
MOOD_MAX: int = 5
PASSWORD_MIN_LENGTH: int = 6


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity asserted by a verified token: subject id + email at issuance."""
    id: str
    email: str

    def to_dict(self) -> dict:
        return {"id": self.id, "email": self.email}


@dataclass(frozen=True)
class AccountView:
    """Public projection of an account — never includes the password hash."""
    id: str
    email: str
    name: str | None = None

    def to_dict(self) -> dict:
        return {"id": self.id, "email": self.email, "name": self.name}
