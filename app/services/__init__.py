"""Services package - service class exports."""

from app.services.admin import AdminGuard, Credentials
from app.services.summary import AggregationGate, FallbackCoordinator, SummaryResolver

__all__ = [
    "AdminGuard",
    "Credentials",
    "AggregationGate",
    "FallbackCoordinator",
    "SummaryResolver",
]
