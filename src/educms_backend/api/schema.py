from typing import Annotated

from fastapi import APIRouter, Depends

from educms_backend.business_logic.schema_discovery import discover_schema
from educms_backend.database import get_storage
from educms_backend.storage import StorageClient
from educms_types.envelopes import ApiResponse

schema_router = APIRouter()


@schema_router.get("", response_model=ApiResponse, response_model_exclude_unset=True)
async def get_schema(storage: Annotated[StorageClient, Depends(get_storage)]):
    """Probe every backend table and report whether it answered and its sample columns."""
    probes = await discover_schema(storage)
    return ApiResponse.ok({table: probe.model_dump() for table, probe in probes.items()})
