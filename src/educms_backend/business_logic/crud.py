"""
Business logic for the generic table operations.

Each function receives the TableSpec of the requested table, translates field
names in both directions, forwards the operation to the storage backend and
turns backend failures into StorageOperationException (HTTP 500 with the backend's message).
"""

from contextlib import contextmanager
from typing import Any, Dict, List, Mapping
from uuid import uuid4
import logging

from educms_backend.exceptions import EmptyBodyException, StorageOperationException
from educms_backend.mappers import coerce_foreign_keys, map_request_body, map_response_body
from educms_backend.storage import StorageClient, StorageError
from educms_types.tables import PhysicalTable, TableSpec

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str, spec: TableSpec):
    """Re-raise backend failures as StorageOperationException."""
    try:
        yield
    except StorageError as e:
        logger.error(f"{operation} {spec.name} error: {e.message}")
        raise StorageOperationException(
            detail=e.message,
            context={
                "table": spec.physical.value,
                "backend_code": e.code,
                "backend_status": e.status_code,
                "details": e.details,
                "hint": e.hint,
            },
        ) from e


def prepare_write_body(spec: TableSpec, body: Mapping[str, Any]) -> Dict[str, Any]:
    """Translate a request body to storage columns and coerce integer columns."""
    mapped = map_request_body(spec.name, body)
    return coerce_foreign_keys(spec.name, mapped)


async def list_rows(storage: StorageClient, spec: TableSpec) -> List[Dict[str, Any]]:
    with storage_errors("GET", spec):
        rows = await storage.select(spec.physical.value)
    return map_response_body(spec.name, rows or [])


async def get_row(storage: StorageClient, spec: TableSpec, id: str) -> Dict[str, Any]:
    """Fetch the row with this id; zero or several matches are an error."""
    with storage_errors("GET", spec):
        row = await storage.select(spec.physical.value, eq={"id": id}, single=True)
    return map_response_body(spec.name, row)


async def create_row(storage: StorageClient, spec: TableSpec, body: Mapping[str, Any]) -> Dict[str, Any]:
    if not body:
        raise EmptyBodyException()

    row = prepare_write_body(spec, body)

    if spec.physical is PhysicalTable.PROFILES and not row.get("id"):
        row["id"] = str(uuid4())

    logger.info(f"CREATE {spec.physical.value}: {row}")

    with storage_errors("CREATE", spec):
        created = await storage.insert(spec.physical.value, row)
    return map_response_body(spec.name, created)


async def update_row(
    storage: StorageClient,
    spec: TableSpec,
    id: str,
    body: Mapping[str, Any],
) -> Dict[str, Any]:
    """Update the row with this id; the backend rejects an id that matches nothing."""
    values = prepare_write_body(spec, body)

    logger.info(f"UPDATE {spec.physical.value} ID {id}: {values}")

    with storage_errors("UPDATE", spec):
        updated = await storage.update(spec.physical.value, values, eq={"id": id})
    return map_response_body(spec.name, updated)


async def delete_row(storage: StorageClient, spec: TableSpec, id: str) -> None:
    """Delete by id. Deleting an id that does not exist succeeds."""
    logger.info(f"DELETE {spec.physical.value} ID {id}")

    with storage_errors("DELETE", spec):
        await storage.delete(spec.physical.value, eq={"id": id})
