from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends, FastAPI, Request, status

from educms_backend.api.payloads import read_body, read_create_body
from educms_backend.business_logic.crud import (
    create_row,
    delete_row,
    get_row,
    list_rows,
    update_row,
)
from educms_backend.database import get_storage
from educms_backend.exceptions import EndpointNotFoundException
from educms_backend.storage import StorageClient
from educms_types.envelopes import ApiResponse
from educms_types.tables import TableSpec, resolve_table


def resolve_table_spec(table: str, request: Request) -> TableSpec:
    """Path table name -> TableSpec; names outside the registry are unmatched routes."""
    spec = resolve_table(table)
    if spec is None:
        raise EndpointNotFoundException.for_request(request)
    return spec


class TableRouter:
    """
    Generic list/get/create/update/delete routes for every routable table.

    The table is a path parameter resolved against the closed table registry,
    so one set of routes serves all tables.
    """

    id_type = "id"

    def __init__(self, prefix: str = "/api"):
        self.prefix = prefix
        self.router = APIRouter()

    def list(self):
        async def route(
                spec: Annotated[TableSpec, Depends(resolve_table_spec)],
                storage: Annotated[StorageClient, Depends(get_storage)],
        ) -> ApiResponse:
            rows = await list_rows(storage, spec)
            return ApiResponse.ok(rows)
        return route

    def get(self):
        async def route(
                id: str,
                spec: Annotated[TableSpec, Depends(resolve_table_spec)],
                storage: Annotated[StorageClient, Depends(get_storage)],
        ) -> ApiResponse:
            row = await get_row(storage, spec, id)
            return ApiResponse.ok(row)
        return route

    def create(self):
        async def route(
                spec: Annotated[TableSpec, Depends(resolve_table_spec)],
                body: Annotated[Dict[str, Any], Depends(read_create_body)],
                storage: Annotated[StorageClient, Depends(get_storage)],
        ) -> ApiResponse:
            created = await create_row(storage, spec, body)
            return ApiResponse.ok(created, "Data created successfully")
        return route

    def update(self):
        async def route(
                id: str,
                request: Request,
                spec: Annotated[TableSpec, Depends(resolve_table_spec)],
                storage: Annotated[StorageClient, Depends(get_storage)],
        ) -> ApiResponse:
            body = await read_body(request)
            updated = await update_row(storage, spec, id, body)
            return ApiResponse.ok(updated, "Data updated successfully")
        return route

    def delete(self):
        async def route(
                id: str,
                spec: Annotated[TableSpec, Depends(resolve_table_spec)],
                storage: Annotated[StorageClient, Depends(get_storage)],
        ) -> ApiResponse:
            await delete_row(storage, spec, id)
            return ApiResponse.ok(message="Data deleted successfully", include_data=False)
        return route

    def register_routes(self, app: FastAPI):

        item_path = f"/{{table}}/{{{TableRouter.id_type}}}"
        route_options = dict(
            status_code=status.HTTP_200_OK,
            response_model=ApiResponse,
            response_model_exclude_unset=True,
        )

        self.router.add_api_route("/{table}", self.list(), methods=["GET"], name="List rows", **route_options)
        self.router.add_api_route(item_path, self.get(), methods=["GET"], name="Get row", **route_options)
        self.router.add_api_route("/{table}", self.create(), methods=["POST"], name="Create row", **route_options)
        self.router.add_api_route(item_path, self.update(), methods=["PUT"], name="Update row", **route_options)
        self.router.add_api_route(item_path, self.delete(), methods=["DELETE"], name="Delete row", **route_options)

        app.include_router(
            self.router,
            prefix=self.prefix,
            tags=["tables"]
        )

        return self
