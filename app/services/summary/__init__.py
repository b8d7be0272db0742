"""Summary services - aggregation gate, fallback and resolution."""

from app.services.summary.aggregation import AggregationGate
from app.services.summary.errors import (
    AdminAuthRequired,
    AggregationError,
    BadRequest,
    FailureReason,
    Forbidden,
    UpstreamFailure,
)
from app.services.summary.fallback import FallbackCoordinator
from app.services.summary.resolver import ResolvedSummary, SummaryResolver

__all__ = [
    "AggregationGate",
    "FallbackCoordinator",
    "SummaryResolver",
    "ResolvedSummary",
    # Errors
    "AggregationError",
    "BadRequest",
    "Forbidden",
    "AdminAuthRequired",
    "UpstreamFailure",
    "FailureReason",
]
