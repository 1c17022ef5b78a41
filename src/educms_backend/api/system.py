from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from educms_types.envelopes import HealthStatus

system_router = APIRouter()

HOME_PAGE = """
<h1 style="font-family: sans-serif; text-align:center; margin-top:50px;">
  <b>EduCMS server is running</b><br><br>
  <a href="/health" style="color:#007bff; text-decoration:none;">Health check</a> |
  <a href="/api/kelas" style="color:#28a745; text-decoration:none;">Class data</a>
</h1>
"""


@system_router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home():
    return HOME_PAGE


@system_router.get("/health", response_model=HealthStatus)
async def health():
    return HealthStatus(
        status="OK",
        message="EduCMS server is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
