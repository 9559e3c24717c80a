"""Search Client — typed HTTP client for the user search API.

Invariants:
    - limit <= 0 / offset < 0 rejected before any network call
    - limit capped at max_limit, then sent as limit + 1 (over-fetch one record)
    - next_page is True iff the server returned exactly limit + 1 users;
      the extra user is dropped from the response
    - Timeouts → SearchTimeoutError; any other httpx failure (transport, decoding,
      malformed URL) → UnknownTransportError
    - The AccessToken header is sent as UTF-8 bytes
    - 401 → BadAccessTokenError; 400 → typed error from the envelope;
      any other non-200 → ServerFatalError (body not read)
    - No retries, no partial results on failure

Design Decisions:
    - Envelope classified by its code first; text recognition only for
      code-less envelopes (both unknown-field wordings)
    - One httpx.AsyncClient per call: configuration is the only shared state
"""

import logging
import re
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError

from usersearch.config import SYMBOLIC_ORDER_FIELD_MESSAGE, Settings
from usersearch.core.domain_types import ErrorCode
from usersearch.core.errors import (
    BadAccessTokenError, InvalidLimitError, InvalidOffsetError,
    InvalidOrderError, SearchServiceError, SearchTimeoutError,
    ServerFatalError, UnknownBadRequestError, UnknownOrderFieldError,
    UnknownTransportError, UnpackErrorEnvelopeError, UnpackResultError,
)
from usersearch.schemas.users import (
    ErrorEnvelope, SearchRequest, SearchResponse, UserList,
)

logger = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "AccessToken"
DEFAULT_TIMEOUT_SECONDS = 1.0
DEFAULT_MAX_LIMIT = 25

_ORDER_FIELD_SENTENCE = re.compile(r"^OrderField (.*) invalid$")


def build_query_string(request: SearchRequest, wire_limit: int) -> str:
    """Encode request parameters with keys in sorted order."""
    params = {
        "limit": wire_limit,
        "offset": request.offset,
        "order_by": request.order_by,
        "order_field": request.order_field,
        "query": request.query,
    }
    return urlencode(sorted(params.items()))


def classify_bad_request(
    envelope: ErrorEnvelope, request: SearchRequest,
) -> SearchServiceError:
    """Map a 400 envelope to its typed error."""
    message = envelope.error
    if envelope.code == ErrorCode.INVALID_ORDER.value:
        return InvalidOrderError(request.order_by, message)
    if envelope.code == ErrorCode.UNKNOWN_ORDER_FIELD.value:
        return UnknownOrderFieldError(request.order_field)
    if envelope.code == ErrorCode.INVALID_LIMIT.value:
        return InvalidLimitError(request.limit, message)
    if envelope.code == ErrorCode.INVALID_OFFSET.value:
        return InvalidOffsetError(request.offset, message)
    if envelope.code is None:
        if message == SYMBOLIC_ORDER_FIELD_MESSAGE:
            return UnknownOrderFieldError(request.order_field)
        match = _ORDER_FIELD_SENTENCE.match(message)
        if match:
            return UnknownOrderFieldError(match.group(1))
    return UnknownBadRequestError(message)


class SearchClient:
    """Calls the user search API and decodes pages or typed errors."""

    def __init__(
        self,
        url: str,
        access_token: str = "",
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        max_limit: int = DEFAULT_MAX_LIMIT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.access_token = access_token
        self.timeout_seconds = timeout_seconds
        self.max_limit = max_limit
        self._transport = transport

    @classmethod
    def from_settings(
        cls, url: str, settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "SearchClient":
        return cls(
            url=url,
            access_token=settings.access_token,
            timeout_seconds=settings.client_timeout_seconds,
            max_limit=settings.client_max_limit,
            transport=transport,
        )

    async def find_users(self, request: SearchRequest) -> SearchResponse:
        """Fetch one page of users. Raises SearchServiceError subclasses.

        limit is capped at max_limit before the over-fetch, so for a limit
        above the cap the page holds at most max_limit users and next_page
        reports whether more than max_limit matches remain from offset.
        """
        if request.limit <= 0:
            raise InvalidLimitError(request.limit)
        if request.offset < 0:
            raise InvalidOffsetError(request.offset)

        limit = min(request.limit, self.max_limit)
        query_string = build_query_string(request, limit + 1)

        response = await self._send(query_string)
        users = self._decode(response, request)

        next_page = len(users) == limit + 1
        if next_page:
            users = users[:limit]
        logger.debug(
            f"Fetched {len(users)} users",
            extra={"result_count": len(users), "next_page": next_page},
        )
        return SearchResponse(users=users, next_page=next_page)

    async def _send(self, query_string: str) -> httpx.Response:
        separator = "&" if "?" in self.url else "?"
        async with httpx.AsyncClient(
            timeout=self.timeout_seconds, transport=self._transport,
        ) as http:
            try:
                return await http.get(
                    f"{self.url}{separator}{query_string}",
                    headers={ACCESS_TOKEN_HEADER: self.access_token.encode("utf-8")},
                )
            except httpx.TimeoutException:
                raise SearchTimeoutError(query_string) from None
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise UnknownTransportError(e) from e

    def _decode(self, response: httpx.Response, request: SearchRequest) -> list:
        status_code = response.status_code
        if status_code == httpx.codes.UNAUTHORIZED:
            raise BadAccessTokenError()
        if status_code == httpx.codes.BAD_REQUEST:
            try:
                envelope = ErrorEnvelope.model_validate_json(response.content)
            except ValidationError as e:
                raise UnpackErrorEnvelopeError(e) from e
            raise classify_bad_request(envelope, request)
        if status_code != httpx.codes.OK:
            logger.warning(
                f"Search server returned {status_code}",
                extra={"status_code": status_code},
            )
            raise ServerFatalError(status_code)
        try:
            return UserList.validate_json(response.content)
        except ValidationError as e:
            raise UnpackResultError(e) from e
