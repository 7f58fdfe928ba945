"""Contact Routes — add and list contacts for the authenticated owner.

Invariants:
    - Pipeline order: require_auth → field validation → ownership → one store call
    - contact_email is stored (and listed) lower-cased
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import require_auth
from app.core.domain_types import AuthenticatedUser
from app.core.ownership import require_owner
from app.core.validation import parse_payload, validate_user_id_param
from app.infrastructure.database import get_db
from app.schemas.contacts import ContactCreate
from app.services.contacts import ContactStore

router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.post("/add", status_code=status.HTTP_201_CREATED)
async def add_contact(
    body: Any = Body(None),
    user: AuthenticatedUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
):
    """body: {user_id, contact_name, contact_email}"""
    payload = parse_payload(ContactCreate, body)
    owner = require_owner(user, payload.user_id)
    contact_id = await ContactStore(db).add(owner, payload)
    return {"success": True, "id": contact_id}


@router.get("/user/{owner_id}")
async def list_contacts(
    owner_id: str,
    user: AuthenticatedUser = Depends(require_auth),
    db: AsyncSession = Depends(get_db),
):
    validate_user_id_param(owner_id)
    owner = require_owner(user, owner_id)
    contacts = await ContactStore(db).list_for_owner(owner)
    return {"success": True, "contacts": contacts}
