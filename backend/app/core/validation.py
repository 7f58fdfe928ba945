"""Field Validation — pure structural checks applied before ownership or persistence.

Invariants:
    - Every check is PURE: no IO, no DB, no request objects
    - Field checkers raise ValueError; parse_payload() converts the FIRST failure
      into a ValidationError naming the offending field
    - Fields are checked in declaration order, so the reported field is stable
    - FIELD_MESSAGES is the single source of truth for client-facing messages

Design Decisions:
    - Checkers are reused as Pydantic "before" validators (app/schemas/), so a DTO
      can only exist if every rule passed
    - Regexes mirror the public contract exactly (simple single-@ email shape,
      RFC 4122 UUID with version 1-5 and variant 8/9/a/b)
"""

import re
from datetime import datetime, timezone
from typing import Any, TypeVar
from uuid import UUID

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from app.core.domain_types import MOOD_MAX, MOOD_MIN, PASSWORD_MIN_LENGTH
from app.core.errors import ValidationError

UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

FIELD_MESSAGES: dict[str, str] = {
    "id": "id must be a UUID",
    "user_id": "user_id must be a UUID",
    "entry_text": "entry_text is required",
    "mood_rating": f"mood_rating must be an integer {MOOD_MIN}-{MOOD_MAX}",
    "timestamp": "timestamp must be ISO date or omit it",
    "contact_name": "contact_name is required",
    "contact_email": "contact_email must be a valid email",
    "email": "Valid email required",
    "password": f"Password must be >= {PASSWORD_MIN_LENGTH} chars",
    "name": "name must be a string",
}

ModelT = TypeVar("ModelT", bound=BaseModel)


# ─── Shape predicates ────────────────────────────────────────────

def is_uuid(value: Any) -> bool:
    return isinstance(value, str) and UUID_RE.match(value) is not None


def is_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_RE.match(value) is not None


def canonical_uuid(value: str) -> str:
    """Lower-case hyphenated form. Raises ValueError on non-UUID text."""
    return str(UUID(value))


# ─── Field checkers (raise ValueError) ───────────────────────────

def check_uuid(value: Any) -> str:
    if not is_uuid(value):
        raise ValueError("not a UUID")
    return value


def check_email(value: Any) -> str:
    """Email shape check; returns the lower-cased address."""
    if not is_email(value):
        raise ValueError("not an email")
    return value.lower()


def check_required_text(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("empty text")
    return value


def check_password(value: Any) -> str:
    if not isinstance(value, str) or len(value) < PASSWORD_MIN_LENGTH:
        raise ValueError("password too short")
    return value


def coerce_mood(value: Any) -> int:
    """Coerce to a number, then require an integer in [MOOD_MIN, MOOD_MAX].

    Accepts ints, integral floats (4.0) and numeric strings ("4", " 4 ").
    Booleans are rejected even though they are ints in Python.
    """
    if isinstance(value, bool):
        raise ValueError("boolean mood")
    if isinstance(value, str):
        try:
            number: int | float = float(value.strip())
        except ValueError:
            raise ValueError("non-numeric mood") from None
    elif isinstance(value, (int, float)):
        number = value
    else:
        raise ValueError("non-numeric mood")

    if isinstance(number, float):
        if not number.is_integer():
            raise ValueError("non-integer mood")
        number = int(number)
    if not MOOD_MIN <= number <= MOOD_MAX:
        raise ValueError("mood out of range")
    return number


def parse_timestamp(value: Any) -> datetime | None:
    """ISO-8601 date or date-time; None means "use creation time".

    Naive values are taken as UTC; aware values are normalized to UTC.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValueError("unparseable timestamp") from None
    else:
        raise ValueError("timestamp must be a string")
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


# ─── Boundary helpers (raise ValidationError) ────────────────────

def validate_user_id_param(value: Any) -> str:
    """Path segment check for /<resource>/user/{id} routes."""
    if not is_uuid(value):
        raise ValidationError(FIELD_MESSAGES["id"], field="id")
    return value


def parse_payload(model: type[ModelT], data: Any) -> ModelT:
    """Validate a raw JSON body into a typed DTO, short-circuiting on the first bad field."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else None
        message = FIELD_MESSAGES.get(field or "", "Invalid request data")
        raise ValidationError(message, field=field) from None
