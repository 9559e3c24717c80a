"""Domain Types — records and the closed sets that drive ordering.

Invariants:
    - OrderDirection accepts exactly -1, 0, 1; any other integer is invalid
    - OrderField accepts exactly Id, Age, Name; record fields like About are not sortable
    - Record.full_name is derived on access, never stored

Design Decisions:
    - Frozen dataclass for Record: records are read-only snapshots per request
    - IntEnum for OrderDirection: the wire carries it as a string-encoded integer
"""

from dataclasses import dataclass
from enum import Enum, IntEnum

DEFAULT_ORDER_FIELD = "Name"


# ─── Enums ───────────────────────────────────────────────────────

class OrderDirection(IntEnum):
    """Sort direction as sent on the wire in `order_by`."""
    ASCENDING = 1
    AS_IS = 0
    DESCENDING = -1


class OrderField(str, Enum):
    """Whitelisted sort keys. Empty input resolves to NAME."""
    ID = "Id"
    AGE = "Age"
    NAME = "Name"


class ErrorCode(str, Enum):
    """Machine-readable error tags shared by server envelopes and the client."""
    INVALID_LIMIT = "INVALID_LIMIT"
    INVALID_OFFSET = "INVALID_OFFSET"
    BAD_ACCESS_TOKEN = "BAD_ACCESS_TOKEN"
    INVALID_ORDER = "INVALID_ORDER"
    UNKNOWN_ORDER_FIELD = "UNKNOWN_ORDER_FIELD"
    UNKNOWN_BAD_REQUEST = "UNKNOWN_BAD_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    SERVER_FATAL = "SERVER_FATAL"
    UNPACK_ERROR = "UNPACK_ERROR"
    UNPACK_RESULT = "UNPACK_RESULT"
    TIMEOUT = "TIMEOUT"
    UNKNOWN = "UNKNOWN"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Record:
    """One person record as supplied by a RecordSource."""
    id: int
    guid: str
    age: int
    first_name: str
    last_name: str
    about: str
    gender: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
