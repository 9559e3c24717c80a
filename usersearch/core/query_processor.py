"""Query Processor — filter, sort, and paginate a record snapshot.

Invariants:
    - Pure functions: no IO, no async, inputs never mutated
    - Filter matches full name OR about, case-insensitive on both operands
    - Sort is stable; AS_IS keeps the filtered order unchanged
    - Order direction validated before field; field validated before AS_IS short-circuit
    - Window is [offset, min(offset + limit, len)); empty when offset >= len
    - limit None means "no limit"; limit <= 0 and offset < 0 are errors, never clamped
"""

from collections.abc import Sequence

from usersearch.core.domain_types import (
    DEFAULT_ORDER_FIELD, OrderDirection, OrderField, Record,
)
from usersearch.core.errors import (
    InvalidLimitError, InvalidOffsetError, InvalidOrderError,
    UnknownOrderFieldError,
)

_SORT_KEYS = {
    OrderField.ID: lambda r: r.id,
    OrderField.AGE: lambda r: r.age,
    OrderField.NAME: lambda r: r.full_name,
}


def _matches(record: Record, needle: str) -> bool:
    return (
        needle in record.full_name.casefold()
        or needle in record.about.casefold()
    )


def filter_records(records: Sequence[Record], query: str) -> list[Record]:
    """Keep records whose full name or about contains query (case-insensitive)."""
    if not query:
        return list(records)
    needle = query.casefold()
    return [r for r in records if _matches(r, needle)]


def resolve_order_direction(order_by: int) -> OrderDirection:
    try:
        return OrderDirection(order_by)
    except ValueError:
        raise InvalidOrderError(order_by) from None


def resolve_order_field(
    order_field: str, unknown_field_message: str | None = None,
) -> OrderField:
    """Map wire field name to OrderField. Empty string means Name."""
    try:
        return OrderField(order_field or DEFAULT_ORDER_FIELD)
    except ValueError:
        raise UnknownOrderFieldError(
            order_field, unknown_field_message,
        ) from None


def sort_records(
    records: Sequence[Record],
    order_field: str,
    order_by: int,
    unknown_field_message: str | None = None,
) -> list[Record]:
    """Stable sort by a whitelisted field in the requested direction.

    unknown_field_message overrides the UnknownOrderFieldError text so the
    server can choose its wire wording; the error code does not change.
    """
    direction = resolve_order_direction(order_by)
    field = resolve_order_field(order_field, unknown_field_message)
    if direction is OrderDirection.AS_IS:
        return list(records)
    return sorted(
        records,
        key=_SORT_KEYS[field],
        reverse=direction is OrderDirection.DESCENDING,
    )


def paginate(
    records: Sequence[Record], offset: int, limit: int | None,
) -> list[Record]:
    """Return the half-open window [offset, offset + limit)."""
    if offset < 0:
        raise InvalidOffsetError(offset)
    if limit is not None and limit <= 0:
        raise InvalidLimitError(limit)
    if offset >= len(records):
        return []
    end = len(records) if limit is None else min(offset + limit, len(records))
    return list(records[offset:end])


def process_query(
    records: Sequence[Record],
    query: str,
    order_field: str,
    order_by: int,
    offset: int,
    limit: int | None,
    unknown_field_message: str | None = None,
) -> list[Record]:
    """Full pipeline: filter → sort → paginate."""
    matched = filter_records(records, query)
    ordered = sort_records(matched, order_field, order_by, unknown_field_message)
    return paginate(ordered, offset, limit)
