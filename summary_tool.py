#!/usr/bin/env python3
"""
Aggregate a collection or purge a tenant's cache from the command line.

Usage:
    python summary_tool.py example.com /blog                  # Gate path (authorized + cached)
    python summary_tool.py example.com /blog --featured       # Starred items only
    python summary_tool.py example.com /blog --category=News --tag=launch
    python summary_tool.py example.com /blog --direct         # Fallback path (no cache, no allow-list)
    python summary_tool.py --purge example.com                # Purge tenant cache (admin credentials from env)
"""

import asyncio
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container
from app.models.summary import AggregationQuery
from app.services.admin import Credentials
from app.services.summary import AggregationError
from settings import ADMIN_PASS, ADMIN_USER
from settings.logging import setup_logging

logger = setup_logging(to_file=False)


def _option(args: list[str], name: str) -> str | None:
    prefix = f"--{name}="
    for a in args:
        if a.startswith(prefix):
            return a[len(prefix) :]
    return None


async def run_aggregate(query: AggregationQuery, direct: bool) -> list[dict]:
    """Aggregate through the gate, or directly with ``--direct``."""
    if direct:
        return await container.fallback.aggregate_direct(query.seed_url(), featured=query.featured)
    return await container.gate.aggregate(query)


async def run_purge(domain: str) -> str:
    return await container.gate.purge_tenant(domain, Credentials(ADMIN_USER, ADMIN_PASS))


def main():
    args = sys.argv[1:]
    container.init()

    if "--purge" in args:
        rest = [a for a in args if a != "--purge"]
        if not rest:
            print(__doc__)
            sys.exit(1)
        purged = asyncio.run(run_purge(rest[0]))
        logger.info("Purged cache for {}", purged)
        return

    positional = [a for a in args if not a.startswith("--")]
    if len(positional) != 2:
        print(__doc__)
        sys.exit(1)

    domain, base = positional
    query = AggregationQuery.from_params(
        domain,
        base,
        category=_option(args, "category"),
        tag=_option(args, "tag"),
        featured="--featured" in args,
    )
    direct = "--direct" in args
    logger.info("Aggregating {}{} ({})", query.domain, query.base_path, "direct" if direct else "gate")

    try:
        items = asyncio.run(run_aggregate(query, direct))
    except AggregationError as e:
        logger.error("Aggregation failed: {}", e.message)
        sys.exit(2)

    print(f"\n{len(items)} items")
    for item in items:
        print(f"  - {item.get('title', item.get('id', '?'))}")


if __name__ == "__main__":
    main()
