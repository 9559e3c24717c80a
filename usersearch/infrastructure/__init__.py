"""Infrastructure Layer — record loading, HTTP client, and cross-cutting concerns.

Invariants:
    - All external calls wrapped with timeout and error mapping
    - Failures surface as typed errors from core/errors.py
"""
