from typing import Annotated

from fastapi import APIRouter, Depends

from educms_backend.business_logic.stats import dashboard_stats
from educms_backend.database import get_storage
from educms_backend.storage import StorageClient
from educms_types.envelopes import ApiResponse

dashboard_router = APIRouter()


@dashboard_router.get("/stats", response_model=ApiResponse, response_model_exclude_unset=True)
async def get_dashboard_stats(storage: Annotated[StorageClient, Depends(get_storage)]):
    """Row counts for the dashboard; a failed count is reported as 0."""
    stats = await dashboard_stats(storage)
    return ApiResponse.ok(stats.model_dump())
