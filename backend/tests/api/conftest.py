"""API test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test DB session
    - db_manager patched so /health sees the test engine
    - alice/bob are registered through the real /auth/register route
"""

import pytest
from httpx import ASGITransport, AsyncClient

import app.infrastructure.database as db_module
from app.infrastructure.database import get_db, DatabaseSessionManager
from app.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def register(client):
    """Register an account via the API and return auth material for it."""
    async def _register(
        email: str, password: str = "secret1", name: str | None = None,
    ) -> dict:
        res = await client.post(
            "/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        assert res.status_code == 201, res.text
        body = res.json()
        return {
            "id": body["user"]["id"],
            "email": body["user"]["email"],
            "token": body["token"],
            "headers": {"Authorization": f"Bearer {body['token']}"},
        }

    return _register


@pytest.fixture
async def alice(register):
    return await register("alice@example.com", name="Alice")


@pytest.fixture
async def bob(register):
    return await register("bob@example.com", name="Bob")
