"""Error Hierarchy — typed, coded exceptions for every search failure mode.

Invariants:
    - Every error has a code (ErrorCode), category (ErrorCategory), severity (ErrorSeverity)
    - The same class is raised on both sides of the wire: the server serializes
      it with to_response(), the client rebuilds it from the envelope code
    - Request errors are 400/401; RecordSourceError is 500 with a generic public message
    - Client-only errors (transport, decoding) carry http_status None

Design Decisions:
    - Single hierarchy with SearchServiceError base: FastAPI global handler catches all
    - Envelope is the flat {"error": str} shape plus a "code" tag
"""

from enum import Enum

from usersearch.core.domain_types import ErrorCode


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    INTERNAL = "internal"
    TRANSPORT = "transport"
    DECODE = "decode"


class SearchServiceError(Exception):
    """Base exception for all user search errors."""

    public_message: str | None = None

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the wire error envelope."""
        return {
            "error": self.public_message or self.message,
            "code": self.code.value,
        }


# ─── Request Errors (400/401) ───────────────────────────────────

class InvalidLimitError(SearchServiceError):
    """Page size is not a positive integer."""
    def __init__(self, limit: object, message: str | None = None):
        super().__init__(
            message or "limit must be > 0",
            ErrorCode.INVALID_LIMIT, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.limit = limit


class InvalidOffsetError(SearchServiceError):
    """Window start is not a non-negative integer."""
    def __init__(self, offset: object, message: str | None = None):
        super().__init__(
            message or "offset must be >= 0",
            ErrorCode.INVALID_OFFSET, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.offset = offset


class BadAccessTokenError(SearchServiceError):
    """Access token missing or not accepted."""
    def __init__(self):
        super().__init__(
            "Bad AccessToken",
            ErrorCode.BAD_ACCESS_TOKEN, ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, 401,
        )


class InvalidOrderError(SearchServiceError):
    """order_by is not an integer in {-1, 0, 1}."""
    def __init__(self, value: object, message: str | None = None):
        super().__init__(
            message or f"invalid order: {value}",
            ErrorCode.INVALID_ORDER, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.value = value


class UnknownOrderFieldError(SearchServiceError):
    """order_field is not one of Id, Age, Name."""
    def __init__(self, field: str, message: str | None = None):
        super().__init__(
            message or f"OrderField {field} invalid",
            ErrorCode.UNKNOWN_ORDER_FIELD, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class UnknownBadRequestError(SearchServiceError):
    """400 response the client could not classify."""
    def __init__(self, server_message: str):
        super().__init__(
            f"unknown bad request error: {server_message}",
            ErrorCode.UNKNOWN_BAD_REQUEST, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 400,
        )
        self.server_message = server_message


# ─── Server Errors (500) ────────────────────────────────────────

class RecordSourceError(SearchServiceError):
    """Records could not be loaded. Cause is logged, never sent."""

    public_message = "Internal Server Error"

    def __init__(self, message: str, source: str = ""):
        super().__init__(
            f"Record source {source} failed: {message}" if source else message,
            ErrorCode.INTERNAL_ERROR, ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
        self.source = source


class ServerFatalError(SearchServiceError):
    """Server answered 500 or an unexpected status."""
    def __init__(self, status_code: int):
        super().__init__(
            "SearchServer fatal error",
            ErrorCode.SERVER_FATAL, ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
        self.status_code = status_code


# ─── Client Errors (no HTTP status) ─────────────────────────────

class UnpackErrorEnvelopeError(SearchServiceError):
    """400 body is not a valid error envelope."""
    def __init__(self, cause: object):
        super().__init__(
            f"cant unpack error json: {cause}",
            ErrorCode.UNPACK_ERROR, ErrorCategory.DECODE,
        )
        self.cause = cause


class UnpackResultError(SearchServiceError):
    """200 body is not a list of users."""
    def __init__(self, cause: object):
        super().__init__(
            f"cant unpack result json: {cause}",
            ErrorCode.UNPACK_RESULT, ErrorCategory.DECODE,
        )
        self.cause = cause


class SearchTimeoutError(SearchServiceError):
    """Call did not complete within the client timeout."""
    def __init__(self, query_string: str):
        super().__init__(
            f"timeout for {query_string}",
            ErrorCode.TIMEOUT, ErrorCategory.TRANSPORT,
        )
        self.query_string = query_string


class UnknownTransportError(SearchServiceError):
    """Any transport failure other than a timeout (e.g. connection refused)."""
    def __init__(self, cause: object):
        super().__init__(
            f"unknown error {cause}",
            ErrorCode.UNKNOWN, ErrorCategory.TRANSPORT,
        )
        self.cause = cause
