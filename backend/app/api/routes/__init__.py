"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Protected routes run: require_auth → parse_payload → require_owner → one store call
"""
