"""Summary API views - thin layer over services."""

from loguru import logger
from pydantic import ValidationError

from app.container import container
from app.models.summary import AggregationQuery
from app.repositories.cache import StorageError
from app.services.summary import AdminAuthRequired, BadRequest, Forbidden, UpstreamFailure
from settings import CACHE_CONTROL
from web.api.errors import (
    AdminUnauthorizedError,
    BadRequestError,
    ForbiddenError,
    ServerError,
    UpstreamAuthError,
    parse_basic_auth,
)

from .schemas import PurgeRequest, PurgeResponse, SummaryResponse

SUMMARY_HEADERS = {"Cache-Control": CACHE_CONTROL}


async def get_summary(
    domain: str | None,
    base: str | None,
    category: str | None = None,
    tag: str | None = None,
    featured: str | None = None,
) -> SummaryResponse:
    """GET /api/summary - aggregated items for a licensed domain.

    Send ``SUMMARY_HEADERS`` with a successful response.
    """
    if not (domain or "").strip() or not (base or "").strip():
        raise BadRequestError("Missing or invalid domain/base")

    query = AggregationQuery.from_params(domain, base, category, tag, featured)
    try:
        items = await container.gate.aggregate(query)
    except BadRequest as e:
        raise BadRequestError(e.message) from e
    except Forbidden as e:
        raise ForbiddenError(e.message) from e
    except UpstreamFailure as e:
        if e.auth_required:
            raise UpstreamAuthError() from e
        raise ServerError("Failed to aggregate summary", detail=e.message) from e

    return SummaryResponse(items=items)


async def purge_summary(body: dict | None, authorization: str | None) -> PurgeResponse:
    """POST /api/summary/purge - drop a tenant's cache. Basic-auth admin only."""
    try:
        request = PurgeRequest.model_validate(body or {})
    except ValidationError as e:
        raise BadRequestError("domain required") from e

    try:
        purged = await container.gate.purge_tenant(request.domain or "", parse_basic_auth(authorization))
    except AdminAuthRequired as e:
        raise AdminUnauthorizedError() from e
    except BadRequest as e:
        raise BadRequestError(e.message) from e
    except StorageError as e:
        logger.error("purge error: {}", e)
        raise ServerError("purge failed") from e

    return PurgeResponse(purged=purged)
