"""Account Routes — identity echo for a valid token.

Invariants:
    - GET /me never touches the database: the token alone is the identity
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import require_auth
from app.core.domain_types import AuthenticatedUser

router = APIRouter(tags=["account"])


@router.get("/me")
async def me(user: AuthenticatedUser = Depends(require_auth)):
    return {"ok": True, "user": user.to_dict()}
