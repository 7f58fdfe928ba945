"""Pydantic Schemas — request DTOs for API endpoints.

Invariants:
    - Schemas validate at system boundary (raw JSON body → typed DTO)
    - Field rules come from core/validation.py; schemas only wire them to fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
