"""
Main EduCMS API client.

Example usage:
    ```python
    async with EduCMSClient(base_url="http://localhost:3000") as client:
        classes = await client.kelas.list()
        await client.kelas.create({"nama_kelas": "Math", "id_guru": 7})
        stats = await client.dashboard_stats()
    ```
"""

from typing import Any, Dict, Optional, Union
import logging

import httpx

from educms_client.base import TableEndpointClient
from educms_client.http import AsyncHTTPClient
from educms_types.envelopes import DashboardStats, HealthStatus, TableProbe
from educms_types.tables import LogicalTable, PhysicalTable

logger = logging.getLogger(__name__)


class EduCMSClient:
    """
    Client for the EduCMS API.

    Args:
        base_url: Base URL of the server (e.g., "http://localhost:3000")
        timeout: Request timeout in seconds; httpx's default when None
        headers: Additional headers to include in all requests
        transport: Custom httpx transport (tests)
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._http = AsyncHTTPClient(
            base_url=base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )
        self._tables: Dict[str, TableEndpointClient] = {}

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def http(self) -> AsyncHTTPClient:
        return self._http

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> "EduCMSClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def table(self, name: Union[str, LogicalTable, PhysicalTable]) -> TableEndpointClient:
        """Endpoint client for any table name (lazy-loaded)."""
        key = name.value if isinstance(name, (LogicalTable, PhysicalTable)) else name
        if key not in self._tables:
            self._tables[key] = TableEndpointClient(self._http, key)
        return self._tables[key]

    @property
    def kelas(self) -> TableEndpointClient:
        return self.table(LogicalTable.KELAS)

    @property
    def pengguna(self) -> TableEndpointClient:
        return self.table(LogicalTable.PENGGUNA)

    @property
    def materi(self) -> TableEndpointClient:
        return self.table(LogicalTable.MATERI)

    @property
    def tugas(self) -> TableEndpointClient:
        return self.table(LogicalTable.TUGAS)

    @property
    def kuis(self) -> TableEndpointClient:
        return self.table(LogicalTable.KUIS)

    @property
    def forum(self) -> TableEndpointClient:
        return self.table(LogicalTable.FORUM)

    async def dashboard_stats(self) -> DashboardStats:
        data = await self._http.get_data("/api/dashboard/stats")
        return DashboardStats.model_validate(data or {})

    async def schema(self) -> Dict[str, TableProbe]:
        data = await self._http.get_data("/api/schema")
        return {table: TableProbe.model_validate(probe) for table, probe in (data or {}).items()}

    async def health(self) -> HealthStatus:
        response = await self._http.get("/health")
        return HealthStatus.model_validate(response.json())
