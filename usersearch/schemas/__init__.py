"""Pydantic Schemas — wire contracts shared by the API and the client.

Invariants:
    - Schemas validate at system boundary (query results, error bodies)
    - Field aliases match the wire names exactly (Id, Name, Age, About, Gender)
"""
