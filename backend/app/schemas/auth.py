"""Auth Schemas — request DTOs for /auth/register and /auth/login.

Invariants:
    - email is lower-cased on the way in (accounts are case-insensitive)
    - RegisterRequest enforces the password policy; LoginRequest does not,
      so a short password is just a failed login, not a hint
"""

from typing import Any

from pydantic import BaseModel, field_validator

from app.core.validation import check_email, check_password


class RegisterRequest(BaseModel):
    email: str
    password: str
    name: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: Any) -> str:
        return check_email(v)

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, v: Any) -> str:
        return check_password(v)

    @field_validator("name", mode="before")
    @classmethod
    def empty_name_is_none(cls, v: Any) -> str | None:
        if v is None or v == "":
            return None
        if not isinstance(v, str):
            raise ValueError("name must be a string")
        return v


class LoginRequest(BaseModel):
    email: str
    password: str = ""

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: Any) -> str:
        return check_email(v)

    @field_validator("password", mode="before")
    @classmethod
    def non_string_password_is_empty(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""
