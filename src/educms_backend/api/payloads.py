"""
Request body parsing for table writes.

Create and update accept JSON objects, urlencoded forms and multipart forms.
Multipart file parts are recorded by file name under their field name.
"""

import json
from typing import Any, Dict

from fastapi import Request
from starlette.datastructures import UploadFile

from educms_backend.exceptions import BadRequestException, EmptyBodyException

FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


async def read_form_body(request: Request) -> Dict[str, Any]:
    body: Dict[str, Any] = {}
    async with request.form() as form:
        for key, value in form.multi_items():
            if isinstance(value, UploadFile):
                # Browsers send an empty part when no file was picked
                if value.filename:
                    body[key] = value.filename
            else:
                body[key] = value
    return body


async def read_json_body(request: Request) -> Dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        body = json.loads(raw)
    except ValueError as e:
        raise BadRequestException(detail=f"Malformed JSON body: {e}") from e

    if body is None:
        return {}
    if not isinstance(body, dict):
        raise BadRequestException(detail="Request body must be a JSON object")
    return body


async def read_body(request: Request) -> Dict[str, Any]:
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        return await read_form_body(request)
    return await read_json_body(request)


async def read_create_body(request: Request) -> Dict[str, Any]:
    """Body of a create; empty bodies are rejected before storage is resolved."""
    body = await read_body(request)
    if not body:
        raise EmptyBodyException()
    return body
