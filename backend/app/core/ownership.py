"""Ownership Guard — a caller may only read or write rows owned by their own identity.

Invariants:
    - Runs AFTER structural validation: malformed ids are 400, never 403
    - No identity attached → AuthError (401), mismatch → PermissionDeniedError (403)
    - Comparison is strict equality on the identity string carried by the token;
      a differently-cased spelling of the same UUID is a mismatch
    - PURE: no IO; the returned AccountId is what the store filters/inserts by
"""

from uuid import UUID

from app.core.domain_types import AccountId, AuthenticatedUser
from app.core.errors import AuthError, PermissionDeniedError


def require_owner(
    user: AuthenticatedUser | None, claimed_owner: str,
) -> AccountId:
    """Return the owner id if it matches the authenticated identity."""
    if user is None or not user.id:
        raise AuthError("Unauthenticated")
    if claimed_owner != user.id:
        raise PermissionDeniedError()
    return AccountId(UUID(claimed_owner))
