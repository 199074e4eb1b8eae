"""
Shared error handling for the Product Catalog Access Layer.
"""

from enum import Enum
from typing import Dict, Any, Optional
from pydantic import BaseModel

from shared.logging import request_id_var


class ErrorResponse(BaseModel):
    """Standard error response format."""

    request_id: Optional[str] = None
    code: str
    message: str
    details: Dict[str, Any] = {}


class AccessLayerException(Exception):
    """Base exception for Access Layer services."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            request_id=request_id_var.get(),
            code=self.code,
            message=self.message,
            details=self.details
        )


class ServiceError(AccessLayerException):
    """Service-related errors."""

    def __init__(self, message: str = "Service error", details: Optional[Dict[str, Any]] = None):
        super().__init__("SERVICE_ERROR", message, details)


class FetchErrorKind(str, Enum):
    """Closed set of upstream fetch failure kinds."""

    TIMEOUT = "timeout"
    CONNECTION_ERROR = "connection_error"
    DECODE_ERROR = "decode_error"
    SERVER_ERROR = "server_error"
    UNKNOWN = "unknown"


class FetchError(AccessLayerException):
    """Upstream fetch failure. Subclasses are the only concrete kinds."""

    kind: FetchErrorKind = FetchErrorKind.UNKNOWN

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        details.setdefault("kind", self.kind.value)
        super().__init__("UPSTREAM_FETCH_ERROR", message, details)


class FetchTimeoutError(FetchError):
    """Upstream did not answer within the time budget."""

    kind = FetchErrorKind.TIMEOUT

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Request timed out after {timeout_seconds:g} seconds. "
            "Please check your connection and try again.",
            {"timeout_seconds": timeout_seconds}
        )


class FetchConnectionError(FetchError):
    """Upstream could not be reached."""

    kind = FetchErrorKind.CONNECTION_ERROR

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(
            f"Network error: Unable to connect to the server. {detail}".rstrip(),
            {"error": detail}
        )


class FetchDecodeError(FetchError):
    """Upstream payload was malformed."""

    kind = FetchErrorKind.DECODE_ERROR

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        if detail is None:
            message = "Received invalid data from the server."
        else:
            message = f"Invalid response format: {detail}"
        super().__init__(message, {"error": detail})


class UpstreamServerError(FetchError):
    """Upstream answered with a non-success status."""

    kind = FetchErrorKind.SERVER_ERROR

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(
            f"Server returned error: {status_code} - {reason}",
            {"status_code": status_code, "reason": reason}
        )


class UnknownFetchError(FetchError):
    """Anything else raised by the upstream."""

    kind = FetchErrorKind.UNKNOWN

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"An unexpected error occurred: {detail}", {"error": detail})
