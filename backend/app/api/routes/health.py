"""Health Probe — process liveness plus database reachability.

Invariants:
    - GET /health returns 200 {ok: true, db_time} when the database answers
    - Any database failure is 500 {ok: false, error}, without driver detail
"""

import logging
from datetime import datetime

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


def _unhealthy() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"ok": False, "error": "DB connection failed"},
    )


@router.get("/health")
async def health_check():
    manager = database.db_manager
    if manager is None:
        return _unhealthy()
    try:
        db_time = await manager.database_time()
    except Exception as e:
        logger.error(f"DB health check failed: {e}")
        return _unhealthy()
    if isinstance(db_time, datetime):
        db_time = db_time.isoformat()
    return {"ok": True, "db_time": str(db_time)}
