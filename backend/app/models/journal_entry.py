"""Journal Entry ORM — a mood-rated free-text note owned by one account.

Invariants:
    - Always belongs to an account (user_id FK)
    - mood_rating in [1, 5] (checked at the boundary and by a CHECK constraint)
    - timestamp defaults to insertion time
    - id is autoincrement: the listing tie-break follows insertion order
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base, utc_isoformat


class JournalEntry(Base):
    __tablename__ = "journal_entries"
    __table_args__ = (
        CheckConstraint(
            "mood_rating BETWEEN 1 AND 5", name="ck_journal_mood_range",
        ),
        Index("ix_journal_entries_user_ts", "user_id", "timestamp"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    entry_text: Mapped[str] = mapped_column(Text, nullable=False)
    mood_rating: Mapped[int] = mapped_column(Integer, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": str(self.user_id),
            "entry_text": self.entry_text,
            "mood_rating": self.mood_rating,
            "timestamp": utc_isoformat(self.timestamp),
        }
