"""Journal Schemas — request DTO for POST /journal/entry.

Invariants:
    - user_id is a UUID string, entry_text non-blank, mood_rating int in [1, 5]
    - timestamp is None (use creation time) or a timezone-aware datetime
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator

from app.core.validation import (
    check_required_text, check_uuid, coerce_mood, parse_timestamp,
)


class JournalEntryCreate(BaseModel):
    """Journal entry creation — field order is the validation order."""
    user_id: str
    entry_text: str
    mood_rating: int
    timestamp: datetime | None = None

    @field_validator("user_id", mode="before")
    @classmethod
    def validate_user_id(cls, v: Any) -> str:
        return check_uuid(v)

    @field_validator("entry_text", mode="before")
    @classmethod
    def validate_entry_text(cls, v: Any) -> str:
        return check_required_text(v)

    @field_validator("mood_rating", mode="before")
    @classmethod
    def validate_mood_rating(cls, v: Any) -> int:
        return coerce_mood(v)

    @field_validator("timestamp", mode="before")
    @classmethod
    def validate_timestamp(cls, v: Any) -> datetime | None:
        return parse_timestamp(v)
