"""Caller-side resolution: gate first, direct fetch on recoverable failure, overall deadline."""

import asyncio
import time
from dataclasses import dataclass, field

from loguru import logger

from app.models.summary import AggregationQuery, CollectionItem
from app.services.summary.aggregation import AggregationGate
from app.services.summary.errors import UpstreamFailure
from app.services.summary.fallback import FallbackCoordinator

GATE_TIMEOUT = 15.0
DEADLINE = 25.0


@dataclass
class ResolvedSummary:
    """Items plus the path that produced them: ``gate``, ``fallback`` or ``none``."""

    items: list[CollectionItem] = field(default_factory=list)
    source: str = "none"


class SummaryResolver:
    """What a widget does with the gate: never block past the deadline."""

    def __init__(
        self,
        gate: AggregationGate,
        fallback: FallbackCoordinator,
        gate_timeout: float = GATE_TIMEOUT,
        deadline: float = DEADLINE,
    ):
        self._gate = gate
        self._fallback = fallback
        self._gate_timeout = gate_timeout
        self._deadline = deadline

    async def resolve(
        self,
        query: AggregationQuery,
        headers: dict[str, str] | None = None,
        cookies: dict[str, str] | None = None,
    ) -> ResolvedSummary:
        """``BadRequest`` and ``Forbidden`` propagate; everything else resolves."""
        started = time.monotonic()
        try:
            items = await asyncio.wait_for(
                self._gate.aggregate(query),
                timeout=min(self._gate_timeout, self._deadline),
            )
            return ResolvedSummary(items=items, source="gate")
        except UpstreamFailure as e:
            logger.info("Gate failed for {} ({}), falling back to direct fetch", query.domain, e.reason.value)
        except asyncio.TimeoutError:
            logger.warning("Gate timed out for {}, falling back to direct fetch", query.domain)

        remaining = self._deadline - (time.monotonic() - started)
        if remaining <= 0:
            return ResolvedSummary()

        try:
            items = await asyncio.wait_for(
                self._fallback.aggregate_direct(
                    self._fallback.seed_url_for(query),
                    featured=query.featured,
                    headers=headers,
                    cookies=cookies,
                ),
                timeout=remaining,
            )
        except asyncio.TimeoutError:
            logger.warning("Direct fetch for {} missed the deadline", query.domain)
            return ResolvedSummary()
        return ResolvedSummary(items=items, source="fallback")
