"""Error Hierarchy — typed exceptions for every failure mode of the request pipeline.

Invariants:
    - Every error has a code (str) and an http_status
    - 4xx errors carry a human-readable message that is safe to return
    - 5xx errors carry a generic message; detail goes to the log, never the caller
    - to_response() produces the REST envelope for both route families

Design Decisions:
    - Single hierarchy with WellnoteError base: one FastAPI handler catches all
    - PermissionDeniedError instead of PermissionError: the builtin keeps its meaning
"""


class WellnoteError(Exception):
    """Base exception for all Wellnote errors."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self, envelope: bool = True) -> dict:
        """Resource routes use {success, error}; auth routes use bare {error}."""
        if envelope:
            return {"success": False, "error": self.message}
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(WellnoteError):
    """Malformed or missing input."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, "VALIDATION_ERROR", 400)
        self.field = field


class AuthError(WellnoteError):
    """Missing, invalid or expired credential, or failed login."""
    def __init__(self, message: str = "Unauthenticated"):
        super().__init__(message, "AUTH_ERROR", 401)


class PermissionDeniedError(WellnoteError):
    """Authenticated, but not the owner of the requested resource."""
    def __init__(self, message: str = "Forbidden: user mismatch"):
        super().__init__(message, "PERMISSION_DENIED", 403)


class ConflictError(WellnoteError):
    """Duplicate value for a unique key."""
    def __init__(self, message: str):
        super().__init__(message, "CONFLICT", 409)


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalError(WellnoteError):
    """Persistence or unexpected failure. Message is always generic."""
    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, "INTERNAL_ERROR", 500)


class DatabaseError(InternalError):
    """Database operation failed outside a store's own error translation."""
    def __init__(self, operation: str):
        super().__init__("Database operation failed")
        self.code = "DATABASE_ERROR"
        self.operation = operation
