"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Record loading accessed through the RecordSource Protocol
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests pass plain fakes
    - load() is synchronous: the shell moves it off the event loop
"""

from typing import Protocol

from usersearch.core.domain_types import Record


class RecordSource(Protocol):
    """Supplies a deterministic ordered snapshot of records.

    Raises RecordSourceError when the snapshot cannot be produced.
    """
    def load(self) -> list[Record]: ...
