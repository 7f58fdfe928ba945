"""Journal Routes — create and list journal entries for the authenticated owner.

Invariants:
    - Pipeline order: require_auth → field validation → ownership → one store call
    - A malformed owner id is 400 even when it also belongs to someone else
    - Listing another user's entries is 403, never an empty list
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import require_auth
from app.core.domain_types import AuthenticatedUser
from app.core.ownership import require_owner
from app.core.validation import parse_payload, validate_user_id_param
from app.infrastructure.database import get_db
from app.schemas.journal import JournalEntryCreate
from app.services.journal import JournalStore

router = APIRouter(prefix="/journal", tags=["journal"])


@router.post("/entry", status_code=status.HTTP_201_CREATED)
async def create_journal_entry(
    body: Any = Body(None),
    user: AuthenticatedUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
):
    """body: {user_id, entry_text, mood_rating (1-5), timestamp (optional ISO)}"""
    payload = parse_payload(JournalEntryCreate, body)
    owner = require_owner(user, payload.user_id)
    entry_id = await JournalStore(db).create(owner, payload)
    return {"success": True, "id": entry_id}


@router.get("/user/{owner_id}")
async def list_journal_entries(
    owner_id: str,
    user: AuthenticatedUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
):
    """Newest first: timestamp DESC, id DESC."""
    validate_user_id_param(owner_id)
    owner = require_owner(user, owner_id)
    entries = await JournalStore(db).list_for_owner(owner)
    return {"success": True, "entries": entries}
