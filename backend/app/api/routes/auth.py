"""Auth Routes — registration and login; both answer with a fresh identity token.

Invariants:
    - No token required
    - Errors use the bare {error} envelope
    - 400 invalid shape, 409 email taken (register), 401 bad credentials (login)
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_token_service
from app.config import Settings, get_settings
from app.core.validation import parse_payload
from app.infrastructure.database import get_db
from app.schemas.auth import LoginRequest, RegisterRequest
from app.services.accounts import authenticate, register_account
from app.services.tokens import TokenService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    tokens: TokenService = Depends(get_token_service),
):
    """Create an account and log it in."""
    payload = parse_payload(RegisterRequest, body)
    account = await register_account(db, payload, settings.bcrypt_rounds)
    token = tokens.issue(account.id, account.email)
    return {"success": True, "token": token, "user": account.to_dict()}


@router.post("/login")
async def login(
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    tokens: TokenService = Depends(get_token_service),
):
    payload = parse_payload(LoginRequest, body)
    account = await authenticate(db, payload, settings.bcrypt_rounds)
    token = tokens.issue(account.id, account.email)
    return {"success": True, "token": token, "user": account.to_dict()}
