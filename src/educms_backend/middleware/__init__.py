"""Middleware for the FastAPI application."""
from .upload_limiter import UploadSizeLimiterMiddleware

__all__ = ["UploadSizeLimiterMiddleware"]
