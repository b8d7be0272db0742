"""Aggregation errors."""

from enum import Enum


class FailureReason(str, Enum):
    """Why the server-side aggregation could not complete."""

    UPSTREAM_AUTH_REQUIRED = "UPSTREAM_AUTH_REQUIRED"
    UPSTREAM_TRANSIENT = "UPSTREAM_TRANSIENT"
    UPSTREAM_FATAL = "UPSTREAM_FATAL"
    PAGINATION_LOOP = "PAGINATION_LOOP"


class AggregationError(Exception):
    """Base class for aggregation errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class BadRequest(AggregationError):
    """Missing or invalid caller input."""

    def __init__(self, message: str = "Missing or invalid domain/base"):
        super().__init__(message)


class Forbidden(AggregationError):
    """Domain is not on the allow-list."""

    def __init__(self, domain: str):
        self.domain = domain
        super().__init__(f"Unauthorized domain for summary API: {domain}")


class AdminAuthRequired(AggregationError):
    """Administrative operation without valid admin credentials."""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


class UpstreamFailure(AggregationError):
    """Upstream pagination failed; the caller may fall back to a direct fetch."""

    def __init__(self, reason: FailureReason, message: str, url: str | None = None):
        self.reason = reason
        self.url = url
        super().__init__(message)

    @property
    def auth_required(self) -> bool:
        return self.reason is FailureReason.UPSTREAM_AUTH_REQUIRED
