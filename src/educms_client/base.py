"""
Endpoint client for the generic table routes.

One TableEndpointClient serves one table of ``/api/{table}``; records are
plain dicts in the legacy field vocabulary.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

from educms_client.http import AsyncHTTPClient
from educms_types.tables import LogicalTable, PhysicalTable

Identifier = Union[int, str]
Record = Dict[str, Any]


@dataclass
class Attachment:
    """A file sent as one multipart part."""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    def as_part(self):
        return (self.filename, self.content, self.content_type)


class TableEndpointClient:
    """
    List/get/create/update/delete for one table.

    Args:
        http_client: The underlying HTTP client
        table: Logical or physical table name
        api_prefix: Path prefix of the table routes
    """

    def __init__(
        self,
        http_client: AsyncHTTPClient,
        table: Union[str, LogicalTable, PhysicalTable],
        api_prefix: str = "/api",
    ):
        self._http = http_client
        self.table = table.value if isinstance(table, (LogicalTable, PhysicalTable)) else table
        self._base_path = f"{api_prefix.rstrip('/')}/{self.table}"

    @property
    def base_path(self) -> str:
        return self._base_path

    def _build_path(self, id: Optional[Identifier] = None) -> str:
        if id is None:
            return self._base_path
        return f"{self._base_path}/{id}"

    async def list(self) -> List[Record]:
        data = await self._http.get_data(self._base_path)
        return data or []

    async def get(self, id: Identifier) -> Record:
        """
        Raises:
            ServerError: If no row (or more than one) has this id
        """
        return await self._http.get_data(self._build_path(id))

    async def _write(
        self,
        method: str,
        path: str,
        *,
        json_data: Optional[Union[Record, BaseModel]] = None,
        fields: Optional[Dict[str, str]] = None,
        attachments: Optional[Dict[str, Attachment]] = None,
    ) -> Dict[str, Any]:
        send = self._http.post if method == "POST" else self._http.put
        if fields is not None or attachments:
            # Text fields are parts without a file name; the body is multipart with or without attachments
            parts = [(name, (None, value)) for name, value in (fields or {}).items()]
            parts += [(name, attachment.as_part()) for name, attachment in (attachments or {}).items()]
            response = await send(path, files=parts)
        else:
            response = await send(path, json_data=json_data or {})
        return self._http.unwrap(response)

    async def create(
        self,
        json_data: Optional[Union[Record, BaseModel]] = None,
        *,
        fields: Optional[Dict[str, str]] = None,
        attachments: Optional[Dict[str, Attachment]] = None,
    ) -> Dict[str, Any]:
        """
        Create a record from a JSON body, or from form fields plus attachments.

        Returns:
            The response envelope (``data`` holds the created record)
        """
        return await self._write("POST", self._base_path, json_data=json_data, fields=fields, attachments=attachments)

    async def update(
        self,
        id: Identifier,
        json_data: Optional[Union[Record, BaseModel]] = None,
        *,
        fields: Optional[Dict[str, str]] = None,
        attachments: Optional[Dict[str, Attachment]] = None,
    ) -> Dict[str, Any]:
        return await self._write("PUT", self._build_path(id), json_data=json_data, fields=fields, attachments=attachments)

    async def delete(self, id: Identifier) -> Dict[str, Any]:
        response = await self._http.delete(self._build_path(id))
        return self._http.unwrap(response)
