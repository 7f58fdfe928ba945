"""Token Service — issues and verifies signed, expiring identity tokens (JWT).

Invariants:
    - Payload is {sub: account id, email, iat, exp}; exp = iat + ttl (7 days by default)
    - verify() never touches the database: trust is the signature plus the clock
    - Every verification failure surfaces as the same AuthError message
    - Only the configured algorithm is accepted (no "none", no algorithm switching)

Design Decisions:
    - No revocation list: a leaked token stays valid until it expires
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from app.core.domain_types import AuthenticatedUser
from app.core.errors import AuthError
from app.core.validation import canonical_uuid

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid or expired token"
DEFAULT_TTL = timedelta(days=7)


class TokenService:
    """HMAC-signed identity tokens bound to one process-wide secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TTL,
    ):
        if not secret:
            raise ValueError("Token signing secret is required")
        self._secret = secret
        self._algorithm = algorithm
        self.ttl = ttl

    def issue(
        self, account_id: str, email: str, now: datetime | None = None,
    ) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "sub": str(account_id),
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> AuthenticatedUser:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.PyJWTError as e:
            logger.info(f"Token rejected: {type(e).__name__}")
            raise AuthError(INVALID_TOKEN_MESSAGE) from None

        email = payload.get("email")
        if not isinstance(email, str):
            raise AuthError(INVALID_TOKEN_MESSAGE)
        try:
            account_id = canonical_uuid(payload["sub"])
        except (TypeError, ValueError, AttributeError):
            raise AuthError(INVALID_TOKEN_MESSAGE) from None
        return AuthenticatedUser(id=account_id, email=email)
