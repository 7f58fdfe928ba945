"""Database Session Manager — async connection pool with automatic rollback.

Invariants:
    - Every session auto-rolls-back on a SQLAlchemy exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - SQLAlchemy exceptions never reach the caller: stores translate them to
      InternalError (translate_db_errors), anything else becomes DatabaseError
    - One AsyncSession per request (get_db), one persistence operation per handler

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from app.core.errors import DatabaseError, InternalError
from app.db.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling and rollback."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict[str, Any] = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}", extra={"operation": "commit"})
            raise DatabaseError("commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}", extra={"operation": "execute"})
            raise DatabaseError("execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}", extra={"operation": "query"})
            raise DatabaseError("query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}", extra={"operation": "unknown"})
            raise DatabaseError("unknown") from e
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create missing tables from ORM metadata (no migrations)."""
        import app.models  # noqa: F401  populates Base.metadata

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def database_time(self) -> Any:
        """Current time according to the database server."""
        async with self.session() as db:
            result = await db.execute(text("SELECT CURRENT_TIMESTAMP"))
            return result.scalar_one()

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session


@asynccontextmanager
async def translate_db_errors(
    operation: str, user_message: str,
) -> AsyncGenerator[None, None]:
    """Log a failed persistence call in full, surface only user_message.

    No retry: a single failure is the caller's 500.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(
            f"Persistence failure during {operation}: {e}",
            exc_info=True,
            extra={"operation": operation},
        )
        raise InternalError(user_message) from e
