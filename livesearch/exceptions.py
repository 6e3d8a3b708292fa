"""Client exceptions.

Errors raised when a Live Search operation cannot produce a result.
Payload-shape gaps (a response without ``data``) are not errors and
never raise; only transport and decode failures do.
"""

from typing import Any


class LiveSearchError(Exception):
    """Base class for all Live Search client errors.

    Callers can catch this to handle every failed operation in one place.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize client error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class SearchTransportError(LiveSearchError):
    """Raised when the request never produced a response.

    Covers connection failures, timeouts and other transport-level errors.
    """

    def __init__(self, operation: str, api_url: str, reason: str) -> None:
        """Initialize transport error.

        Args:
            operation: Name of the GraphQL operation that failed.
            api_url: Endpoint the request was sent to.
            reason: Underlying transport error text.
        """
        super().__init__(
            f"{operation} request to {api_url} failed: {reason}",
            details={"operation": operation, "api_url": api_url, "reason": reason},
        )


class SearchDecodeError(LiveSearchError):
    """Raised when the response body is not valid JSON."""

    def __init__(self, operation: str, status_code: int, reason: str) -> None:
        """Initialize decode error.

        Args:
            operation: Name of the GraphQL operation that failed.
            status_code: HTTP status code of the undecodable response.
            reason: Underlying decode error text.
        """
        super().__init__(
            f"{operation} response (HTTP {status_code}) is not valid JSON: {reason}",
            details={
                "operation": operation,
                "status_code": status_code,
                "reason": reason,
            },
        )
