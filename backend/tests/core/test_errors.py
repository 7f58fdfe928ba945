"""Error Hierarchy — status codes and response envelopes."""

import pytest

from app.core.errors import (
    AuthError,
    ConflictError,
    DatabaseError,
    InternalError,
    PermissionDeniedError,
    ValidationError,
    WellnoteError,
)


@pytest.mark.parametrize("exc,status,code", [
    (ValidationError("bad", field="x"), 400, "VALIDATION_ERROR"),
    (AuthError("nope"), 401, "AUTH_ERROR"),
    (PermissionDeniedError(), 403, "PERMISSION_DENIED"),
    (ConflictError("dup"), 409, "CONFLICT"),
    (InternalError(), 500, "INTERNAL_ERROR"),
    (DatabaseError("commit"), 500, "DATABASE_ERROR"),
])
def test_error_status_and_code(exc, status, code):
    assert isinstance(exc, WellnoteError)
    assert exc.http_status == status
    assert exc.code == code


def test_envelope_response_shape():
    assert ConflictError("dup").to_response() == {"success": False, "error": "dup"}


def test_bare_response_shape():
    assert AuthError("nope").to_response(envelope=False) == {"error": "nope"}


def test_database_error_message_is_generic():
    exc = DatabaseError("commit")
    assert isinstance(exc, InternalError)
    assert exc.message == "Database operation failed"
    assert exc.operation == "commit"
