"""
Async HTTP client for the EduCMS API.

Thin wrapper around httpx that manages the base URL, converts error
responses to exceptions and unwraps the ``{success, data, message}``
envelope. Requests are never retried; a failure is reported once.
"""

from typing import Any, Dict, Optional, Union
import logging

import httpx
from pydantic import BaseModel

from educms_client.exceptions import (
    EduCMSClientError,
    NetworkError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)

logger = logging.getLogger(__name__)


class AsyncHTTPClient:
    """
    Async HTTP client for EduCMS API requests.

    Args:
        base_url: Base URL for the API (e.g., "http://localhost:3000")
        timeout: Request timeout in seconds; httpx's default when None
        headers: Additional headers to include in all requests
        transport: Custom httpx transport (tests)
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._default_headers = headers or {}
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            options: Dict[str, Any] = {"base_url": self.base_url, "follow_redirects": True}
            if self.timeout is not None:
                options["timeout"] = httpx.Timeout(self.timeout)
            if self._transport is not None:
                options["transport"] = self._transport
            self._client = httpx.AsyncClient(**options)
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self, extra_headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            **self._default_headers,
        }
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Convert HTTP error responses to appropriate exceptions."""
        status_code = response.status_code

        try:
            error_data = response.json()
            message = error_data.get("message") or error_data.get("detail") or str(error_data)
        except Exception:
            message = response.text or f"HTTP {status_code}"

        raise exception_from_response(status_code, message)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Make an HTTP request.

        Raises:
            EduCMSClientError: On HTTP errors
            NetworkError: On connection failures
            TimeoutError: On request timeout
        """
        client = await self._get_client()

        if json_data is not None and isinstance(json_data, BaseModel):
            json_data = json_data.model_dump(mode="json", exclude_none=True)

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            response = await client.request(
                method=method,
                url=path,
                params=params,
                json=json_data,
                data=data,
                files=files,
                headers=self._build_headers(headers),
            )
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request failed: {e}") from e

        if not response.is_success:
            logger.debug(f"{method} {path} failed with HTTP {response.status_code}")
            self._handle_error_response(response)

        return response

    async def get(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
        return await self._request("GET", path, params=params)

    async def post(
        self,
        path: str,
        *,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Any] = None,
    ) -> httpx.Response:
        return await self._request("POST", path, json_data=json_data, data=data, files=files)

    async def put(
        self,
        path: str,
        *,
        json_data: Optional[Union[Dict[str, Any], BaseModel]] = None,
        data: Optional[Dict[str, Any]] = None,
        files: Optional[Any] = None,
    ) -> httpx.Response:
        return await self._request("PUT", path, json_data=json_data, data=data, files=files)

    async def delete(self, path: str) -> httpx.Response:
        return await self._request("DELETE", path)

    # Envelope helpers

    @staticmethod
    def unwrap(response: httpx.Response) -> Dict[str, Any]:
        """Parse the ``{success, data, message}`` envelope of a successful response."""
        try:
            payload = response.json()
        except ValueError as e:
            raise EduCMSClientError(
                f"Invalid JSON response: {e}",
                status_code=response.status_code,
            ) from e
        if not isinstance(payload, dict):
            raise EduCMSClientError("Unexpected response shape", status_code=response.status_code)
        return payload

    async def get_data(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET and return the envelope's ``data``."""
        response = await self.get(path, params=params)
        return self.unwrap(response).get("data")
