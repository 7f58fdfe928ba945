"""Error Envelope — which routes answer {success, error} vs bare {error}."""

import pytest

from app.api.error_handlers import uses_envelope


@pytest.mark.parametrize("path", [
    "/journal/entry", "/journal/user/x", "/contacts/add", "/contacts/user/x", "/media",
])
def test_resource_routes_use_success_envelope(path):
    assert uses_envelope(path) is True


@pytest.mark.parametrize("path", ["/auth/register", "/auth/login", "/me"])
def test_auth_routes_use_bare_error(path):
    assert uses_envelope(path) is False
