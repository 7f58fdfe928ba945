"""Request Dependencies — the authenticator stage shared by every protected route.

Invariants:
    - require_auth is the FIRST stage of every resource route and /me
    - Header format is exactly "Authorization: Bearer <token>"
    - Missing/malformed header → AuthError("Missing Bearer token");
      failed verification → AuthError("Invalid or expired token")
    - The resolved identity is returned to the handler AND kept on request.state
      for error logging; nothing downstream re-reads the raw header
    - get_token_service() is built once per process from settings
"""

from datetime import timedelta
from functools import lru_cache

from fastapi import Depends, Header, Request

from app.config import get_settings
from app.core.domain_types import AuthenticatedUser
from app.core.errors import AuthError
from app.services.tokens import TokenService

BEARER_PREFIX = "Bearer "


@lru_cache
def get_token_service() -> TokenService:
    settings = get_settings()
    return TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(days=settings.jwt_expire_days),
    )


def extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX):].strip()
    return token or None


async def require_auth(
    request: Request,
    authorization: str | None = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """Resolve the caller's identity from the bearer token."""
    token = extract_bearer_token(authorization)
    if token is None:
        raise AuthError("Missing Bearer token")
    user = tokens.verify(token)
    request.state.user = user
    return user
