"""Journal Store — the single persistence operation behind each journal route.

Invariants:
    - Callers pass an owner id already approved by the ownership guard
    - Listing order: timestamp DESC, id DESC (id = insertion order tie-break)
    - Omitted timestamp → column default (creation time)
    - SQLAlchemy failures surface as InternalError with a generic message
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import AccountId, JournalEntryId
from app.infrastructure.database import translate_db_errors
from app.models.journal_entry import JournalEntry
from app.schemas.journal import JournalEntryCreate

logger = logging.getLogger(__name__)


class JournalStore:
    """Insert and list journal entries for one owner."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self, owner: AccountId, payload: JournalEntryCreate,
    ) -> JournalEntryId:
        entry = JournalEntry(
            user_id=owner,
            entry_text=payload.entry_text,
            mood_rating=payload.mood_rating,
        )
        if payload.timestamp is not None:
            entry.timestamp = payload.timestamp

        async with translate_db_errors(
            "journal.create", "Failed to create journal entry",
        ):
            self.db.add(entry)
            await self.db.commit()

        logger.info(
            f"Journal entry {entry.id} created",
            extra={"user_id": str(owner)},
        )
        return JournalEntryId(entry.id)

    async def list_for_owner(self, owner: AccountId) -> list[dict]:
        async with translate_db_errors(
            "journal.list", "Failed to fetch journal entries",
        ):
            result = await self.db.execute(
                select(JournalEntry)
                .where(JournalEntry.user_id == owner)
                .order_by(JournalEntry.timestamp.desc(), JournalEntry.id.desc()),
            )
            entries = result.scalars().all()
        return [e.to_dict() for e in entries]
