"""Services Layer — credential verification, tokens, and per-resource stores.

Invariants:
    - Stores perform exactly one persistence operation per call
    - Stores trust their owner argument: ownership is checked before they run
"""
