"""Database Definitions — SQLAlchemy declarative base.

Invariants:
    - Single async engine per process (initialized via infrastructure.database.init_db)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite in tests
"""
