"""Best-effort runtime discovery of backend table columns."""

import logging
from typing import Dict

from educms_backend.storage import StorageClient, StorageError
from educms_types.envelopes import TableProbe
from educms_types.tables import PhysicalTable

logger = logging.getLogger(__name__)


async def probe_table(storage: StorageClient, table: str) -> TableProbe:
    """Select one row; the columns are the keys of that sample row."""
    try:
        rows = await storage.select(table, limit=1)
    except StorageError as e:
        logger.info(f"Schema probe of {table} failed: {e.message}")
        return TableProbe(exists=False)

    columns = list(rows[0].keys()) if rows else []
    return TableProbe(exists=True, columns=columns)


async def discover_schema(storage: StorageClient) -> Dict[str, TableProbe]:
    results = {}
    for table in PhysicalTable:
        results[table.value] = await probe_table(storage, table.value)
    return results
