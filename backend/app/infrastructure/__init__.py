"""Infrastructure Layer — database sessions and logging setup.

Invariants:
    - Only this layer and services/ touch SQLAlchemy engines or sessions
    - Process-scoped resources are created once, from the FastAPI lifespan
"""
