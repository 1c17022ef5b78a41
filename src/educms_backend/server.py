from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from educms_backend.api.api_builder import TableRouter
from educms_backend.api.dashboard import dashboard_router
from educms_backend.api.schema import schema_router
from educms_backend.api.system import system_router
from educms_backend.database import create_storage
from educms_backend.exceptions import register_exception_handlers
from educms_backend.middleware import UploadSizeLimiterMiddleware
from educms_backend.settings import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.storage = create_storage()

    yield

    if app.state.storage is not None:
        await app.state.storage.close()


def create_app() -> FastAPI:
    app = FastAPI(title="EduCMS", lifespan=lifespan)
    app.state.storage = None

    register_exception_handlers(app)

    # Upload size limiter should be before CORS
    app.add_middleware(UploadSizeLimiterMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials="*" not in settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(system_router, tags=["system"])

    # Fixed /api routes must be registered before the generic /api/{table} routes
    app.include_router(schema_router, prefix="/api/schema", tags=["schema"])
    app.include_router(dashboard_router, prefix="/api/dashboard", tags=["dashboard"])

    TableRouter(prefix="/api").register_routes(app)

    return app


app = create_app()
