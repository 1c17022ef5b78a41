"""Client for the hosted storage backend."""

from educms_backend.storage.client import SINGLE_OBJECT, StorageClient, StorageError

__all__ = [
    "SINGLE_OBJECT",
    "StorageClient",
    "StorageError",
]
