"""User Search Package — record search service and its HTTP client.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
