"""Contact Store — the single persistence operation behind each contacts route.

Invariants:
    - Callers pass an owner id already approved by the ownership guard
    - Listing order: created_at DESC, id DESC
    - SQLAlchemy failures surface as InternalError with a generic message
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import AccountId, ContactId
from app.infrastructure.database import translate_db_errors
from app.models.contact import Contact
from app.schemas.contacts import ContactCreate

logger = logging.getLogger(__name__)


class ContactStore:
    """Insert and list contacts for one owner."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, owner: AccountId, payload: ContactCreate) -> ContactId:
        contact = Contact(
            user_id=owner,
            contact_name=payload.contact_name,
            contact_email=payload.contact_email,
        )
        async with translate_db_errors("contacts.add", "Failed to add contact"):
            self.db.add(contact)
            await self.db.commit()

        logger.info(
            f"Contact {contact.id} added", extra={"user_id": str(owner)},
        )
        return ContactId(contact.id)

    async def list_for_owner(self, owner: AccountId) -> list[dict]:
        async with translate_db_errors("contacts.list", "Failed to fetch contacts"):
            result = await self.db.execute(
                select(Contact)
                .where(Contact.user_id == owner)
                .order_by(Contact.created_at.desc(), Contact.id.desc()),
            )
            contacts = result.scalars().all()
        return [c.to_dict() for c in contacts]
