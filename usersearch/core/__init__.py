"""Core Layer — pure query logic, no IO, no async.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or schemas/
    - All functions are pure and deterministic
"""
