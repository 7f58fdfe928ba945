"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Account is the owner; journal entries and contacts are scoped by user_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all runs
"""

from app.models.account import Account  # noqa: F401
from app.models.journal_entry import JournalEntry  # noqa: F401
from app.models.contact import Contact  # noqa: F401
