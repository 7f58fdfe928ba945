"""API Layer — FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; errors go through error_handlers.py

Design Decisions:
    - Thin routes delegate to core (validation, ownership) and services (stores)
"""
