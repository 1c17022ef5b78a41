"""
Dashboard counters.

The six counting queries run concurrently and are joined with the
"settled with default" strategy: every query is awaited, and a failed one
counts as zero instead of failing the whole dashboard.
"""

import asyncio
import logging
from typing import Any, Awaitable, Iterable, List, TypeVar

from educms_backend.storage import StorageClient
from educms_types.envelopes import DashboardStats
from educms_types.tables import DASHBOARD_COUNTERS

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def gather_settled_with_default(awaitables: Iterable[Awaitable[T]], default: T) -> List[T]:
    """Await all, replacing each failure with ``default``."""
    results = await asyncio.gather(*awaitables, return_exceptions=True)
    settled = []
    for result in results:
        if isinstance(result, Exception):
            logger.warning(f"Dashboard query failed, counting as {default!r}: {result}")
            settled.append(default)
        else:
            settled.append(result)
    return settled


def _count(rows: Any) -> int:
    return len(rows) if rows else 0


async def _count_rows(storage: StorageClient, table: str) -> int:
    return _count(await storage.select(table))


async def dashboard_stats(storage: StorageClient) -> DashboardStats:
    counters = list(DASHBOARD_COUNTERS.items())
    counts = await gather_settled_with_default(
        (_count_rows(storage, table.value) for _, table in counters),
        default=0,
    )
    return DashboardStats(**{name: count for (name, _), count in zip(counters, counts)})
