"""Contact Schemas — request DTO for POST /contacts/add.

Invariants:
    - contact_name is stored stripped
    - contact_email is stored lower-cased
"""

from typing import Any

from pydantic import BaseModel, field_validator

from app.core.validation import check_email, check_required_text, check_uuid


class ContactCreate(BaseModel):
    user_id: str
    contact_name: str
    contact_email: str

    @field_validator("user_id", mode="before")
    @classmethod
    def validate_user_id(cls, v: Any) -> str:
        return check_uuid(v)

    @field_validator("contact_name", mode="before")
    @classmethod
    def strip_contact_name(cls, v: Any) -> str:
        return check_required_text(v).strip()

    @field_validator("contact_email", mode="before")
    @classmethod
    def normalize_contact_email(cls, v: Any) -> str:
        return check_email(v)
