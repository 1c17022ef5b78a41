import logging
from typing import Optional

from fastapi import Request

from educms_backend.exceptions import ConfigurationException
from educms_backend.settings import settings
from educms_backend.storage import StorageClient

logger = logging.getLogger(__name__)


def create_storage() -> Optional[StorageClient]:
    """Build the storage client from the environment, or None when unconfigured."""
    if not settings.storage_configured:
        logger.warning(
            "SUPABASE_URL or SUPABASE_KEY not found in environment. "
            "Create a local .env (not committed) with SUPABASE_URL and SUPABASE_KEY."
        )
        return None

    logger.info(f"Using storage backend at {settings.SUPABASE_URL}")
    return StorageClient(settings.SUPABASE_URL, settings.SUPABASE_KEY)


def get_storage(request: Request) -> StorageClient:
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise ConfigurationException()
    return storage
