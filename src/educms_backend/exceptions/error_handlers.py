"""
FastAPI exception handlers.

Every error leaves the server as ``{"success": false, "message": ...}`` with
the exception's status code.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from educms_backend.exceptions.exceptions import (
    EduCMSException,
    BadRequestException,
    EndpointNotFoundException,
    InternalServerException,
)


logger = logging.getLogger(__name__)


async def educms_exception_handler(request: Request, exc: EduCMSException) -> JSONResponse:
    error_response = exc.to_error_response()

    log_error(request, exc)

    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.to_envelope(),
        headers=exc.headers or {},
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Converts request validation errors to a 400 with the first problem as message."""
    errors = []
    for error in exc.errors():
        field = " -> ".join(str(x) for x in error["loc"][1:])
        errors.append(f"{field}: {error['msg']}" if field else error["msg"])

    exception = BadRequestException(
        detail=errors[0] if errors else "Request validation failed",
        context={"validation_errors": errors},
    )
    return await educms_exception_handler(request, exception)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Handle HTTPException raised by Starlette routing.

    Unmatched routes and unsupported methods are both reported as 404.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        educms_exc = EndpointNotFoundException.for_request(request)
    elif exc.status_code == status.HTTP_400_BAD_REQUEST:
        educms_exc = BadRequestException(detail=exc.detail)
    else:
        educms_exc = InternalServerException(detail=exc.detail)
        educms_exc.status_code = exc.status_code

    return await educms_exception_handler(request, educms_exc)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}",
        exc_info=exc,
    )

    exception = InternalServerException(
        detail=str(exc) or "An unexpected error occurred",
        context={"exception_type": type(exc).__name__},
    )
    return await educms_exception_handler(request, exception)


def log_error(request: Request, exception: EduCMSException) -> None:
    log_data = {
        "error_code": exception.error_code,
        "status_code": exception.status_code,
        "method": request.method,
        "path": request.url.path,
        "context": exception.context,
    }

    if exception.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exception.message}", extra=log_data)
    elif exception.status_code >= 400:
        logger.warning(f"Client error {exception.error_code}: {exception.message}", extra=log_data)
    else:
        logger.info(f"Error: {exception.error_code}", extra=log_data)


def register_exception_handlers(app) -> None:
    app.add_exception_handler(EduCMSException, educms_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    logger.info("Registered custom exception handlers")
