"""Health Probe — database clock when reachable, 500 when not."""

import app.infrastructure.database as db_module


async def test_health_reports_database_time(client):
    res = await client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["ok"] is True
    assert body["db_time"]


async def test_health_without_database_is_500(client, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/health")
    assert res.status_code == 500
    assert res.json() == {"ok": False, "error": "DB connection failed"}
