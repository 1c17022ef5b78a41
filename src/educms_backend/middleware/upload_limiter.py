"""
Middleware rejecting oversized write bodies before they reach a route.

Uses pure ASGI instead of BaseHTTPMiddleware so the body is never buffered.
"""
import logging
from starlette.types import ASGIApp, Receive, Scope, Send
from starlette.responses import JSONResponse

from educms_backend.exceptions import PayloadTooLargeException
from educms_backend.settings import settings

logger = logging.getLogger(__name__)


def format_bytes(size: int) -> str:
    for unit in ("B", "KB", "MB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


class UploadSizeLimiterMiddleware:
    """
    Enforces a maximum request body size on POST/PUT requests.

    Only the Content-Length header is checked; chunked bodies pass through.
    """

    def __init__(self, app: ASGIApp, max_size: int = None):
        self.app = app
        self.max_size = max_size if max_size is not None else settings.MAX_UPLOAD_SIZE

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] != "http" or scope.get("method", "") not in ("POST", "PUT"):
            await self.app(scope, receive, send)
            return

        headers = dict(scope.get("headers", []))
        content_length = headers.get(b"content-length")

        if content_length and content_length.isdigit() and int(content_length) > self.max_size:
            content_length = int(content_length)
            client = scope.get("client") or ("unknown", 0)

            logger.warning(
                f"Request rejected: size {format_bytes(content_length)} "
                f"exceeds limit {format_bytes(self.max_size)} "
                f"from {client[0]}"
            )

            exc = PayloadTooLargeException(
                detail=f"Request body too large. Maximum allowed size is {format_bytes(self.max_size)} "
                       f"(received {format_bytes(content_length)})"
            )
            response = JSONResponse(
                status_code=exc.status_code,
                content=exc.to_error_response().to_envelope(),
            )
            await response(scope, receive, send)
            return

        await self.app(scope, receive, send)
