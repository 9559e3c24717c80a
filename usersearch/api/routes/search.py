"""User Search Route — authenticated filter/sort/paginate over the record source.

Invariants:
    - Steps short-circuit in order: auth → load → filter → sort → paginate → project
    - limit/offset are used exactly as received; the client's +1 over-fetch is invisible here
    - Empty offset means 0, empty limit means "all remaining records"
    - Missing or non-integer order_by is INVALID_ORDER (400)
    - Record source failures become a generic 500 (handled globally)

Design Decisions:
    - Steps composed here rather than through process_query: order_by is parsed
      and the sort validated before offset and limit are parsed
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, Query

from usersearch.api.dependencies import get_record_source, require_access_token
from usersearch.config import Settings, get_settings
from usersearch.core.errors import (
    InvalidLimitError, InvalidOffsetError, InvalidOrderError,
)
from usersearch.core.query_processor import filter_records, paginate, sort_records
from usersearch.core.repository_protocols import RecordSource
from usersearch.schemas.users import UserView

logger = logging.getLogger(__name__)
router = APIRouter(tags=["search"])


def _parse_order_by(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidOrderError(raw, f"invalid order value: {raw!r}") from None


def _parse_offset(raw: str) -> int:
    if raw == "":
        return 0
    try:
        return int(raw)
    except ValueError:
        raise InvalidOffsetError(raw, f"invalid offset value: {raw!r}") from None


def _parse_limit(raw: str) -> int | None:
    if raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidLimitError(raw, f"invalid limit value: {raw!r}") from None


@router.get(
    "/",
    response_model=list[UserView],
    dependencies=[Depends(require_access_token)],
)
@router.get(
    "/api/v1/users/search",
    response_model=list[UserView],
    dependencies=[Depends(require_access_token)],
)
async def search_users(
    query: str = Query(""),
    order_field: str = Query(""),
    order_by: str = Query(""),
    limit: str = Query(""),
    offset: str = Query(""),
    source: RecordSource = Depends(get_record_source),
    settings: Settings = Depends(get_settings),
) -> list[UserView]:
    """Search records by name/about text, ordered and windowed."""
    records = await asyncio.to_thread(source.load)

    matched = filter_records(records, query)
    ordered = sort_records(
        matched, order_field, _parse_order_by(order_by),
        settings.unknown_order_field_message(),
    )
    window = paginate(ordered, _parse_offset(offset), _parse_limit(limit))

    logger.info(
        f"Search returned {len(window)} of {len(matched)} matches",
        extra={
            "query": query, "order_field": order_field, "order_by": order_by,
            "limit": limit, "offset": offset, "result_count": len(window),
        },
    )
    return [UserView.from_record(r) for r in window]
