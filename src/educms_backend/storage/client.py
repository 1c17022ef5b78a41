"""
Async client for the hosted storage backend.

The backend is a Supabase project; tables are reached through its PostgREST
interface at ``{SUPABASE_URL}/rest/v1/{table}``. Single-row operations ask
for a JSON object instead of an array, which makes the backend reject any
result that does not contain exactly one row.
"""

from typing import Any, Dict, List, Optional, Union
import logging

import httpx

logger = logging.getLogger(__name__)

SINGLE_OBJECT = "application/vnd.pgrst.object+json"

Filters = Optional[Dict[str, Any]]


class StorageError(Exception):
    """
    Failure reported by the storage backend or while reaching it.

    Attributes:
        message: Backend message, passed through to API clients
        status_code: HTTP status of the backend response (None on network errors)
        code: Backend error code (e.g., "PGRST116", "23505")
        details: Backend details string
        hint: Backend hint string
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details
        self.hint = hint

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code}, "
            f"code={self.code!r})"
        )


class StorageClient:
    """
    Table operations against the storage backend.

    Args:
        url: Project URL (e.g., "https://xyz.supabase.co")
        key: Project API key
        timeout: Request timeout in seconds; httpx's default when None
        transport: Custom httpx transport (tests)
    """

    def __init__(
        self,
        url: str,
        key: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.rest_url = f"{url.rstrip('/')}/rest/v1"
        self._key = key
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            options: Dict[str, Any] = {"base_url": self.rest_url}
            if self._timeout is not None:
                options["timeout"] = httpx.Timeout(self._timeout)
            if self._transport is not None:
                options["transport"] = self._transport
            self._client = httpx.AsyncClient(**options)
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "StorageClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self, *, single: bool = False, prefer: Optional[str] = None) -> Dict[str, str]:
        headers = {
            "apikey": self._key,
            "Authorization": f"Bearer {self._key}",
            "Accept": SINGLE_OBJECT if single else "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    @staticmethod
    def _build_params(
        eq: Filters = None,
        *,
        columns: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, str]:
        params = {}
        if columns is not None:
            params["select"] = columns
        for column, value in (eq or {}).items():
            params[column] = f"eq.{value}"
        if limit is not None:
            params["limit"] = str(limit)
        return params

    @staticmethod
    def _error_from_response(response: httpx.Response) -> StorageError:
        try:
            error_data = response.json()
        except ValueError:
            error_data = None

        if isinstance(error_data, dict):
            return StorageError(
                error_data.get("message") or response.reason_phrase or f"HTTP {response.status_code}",
                status_code=response.status_code,
                code=error_data.get("code"),
                details=error_data.get("details"),
                hint=error_data.get("hint"),
            )
        return StorageError(
            response.text or f"HTTP {response.status_code}",
            status_code=response.status_code,
        )

    async def _request(
        self,
        method: str,
        table: str,
        *,
        params: Optional[Dict[str, str]] = None,
        json_data: Any = None,
        single: bool = False,
        prefer: Optional[str] = None,
    ) -> Any:
        client = self._get_client()

        try:
            response = await client.request(
                method,
                f"/{table}",
                params=params,
                json=json_data,
                headers=self._build_headers(single=single, prefer=prefer),
            )
        except httpx.TimeoutException as e:
            raise StorageError(f"Storage request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise StorageError(f"Storage request failed: {e}") from e

        if not response.is_success:
            error = self._error_from_response(response)
            logger.debug(f"{method} {table} rejected by backend: {error!r}")
            raise error

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def select(
        self,
        table: str,
        *,
        columns: str = "*",
        eq: Filters = None,
        limit: Optional[int] = None,
        single: bool = False,
    ) -> Union[List[Dict[str, Any]], Dict[str, Any]]:
        """
        Select rows.

        With ``single=True`` the backend must find exactly one row; the row
        is returned as a dict.
        """
        params = self._build_params(eq, columns=columns, limit=limit)
        data = await self._request("GET", table, params=params, single=single)
        if data is None:
            return {} if single else []
        return data

    async def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one row and return it as stored."""
        return await self._request(
            "POST",
            table,
            params={"select": "*"},
            json_data=row,
            single=True,
            prefer="return=representation",
        )

    async def update(self, table: str, values: Dict[str, Any], *, eq: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update exactly one row and return it.

        Zero or several matching rows are rejected by the backend and the
        update is not applied.
        """
        params = self._build_params(eq, columns="*")
        return await self._request(
            "PATCH",
            table,
            params=params,
            json_data=values,
            single=True,
            prefer="return=representation",
        )

    async def delete(self, table: str, *, eq: Dict[str, Any]) -> None:
        """Delete matching rows. Matching nothing is not an error."""
        await self._request(
            "DELETE",
            table,
            params=self._build_params(eq),
            prefer="return=minimal",
        )
