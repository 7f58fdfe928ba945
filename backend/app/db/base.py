"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base.metadata is the single source of truth for table definitions

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all Wellnote ORM models."""
    pass


def utc_isoformat(value: datetime) -> str:
    """ISO-8601 with offset; naive values (SQLite) are stored as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()
