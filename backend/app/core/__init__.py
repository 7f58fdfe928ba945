"""Core Layer — pure request-pipeline logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic; failures are typed WellnoteErrors
"""
