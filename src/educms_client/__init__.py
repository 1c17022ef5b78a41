"""
EduCMS client library.

Async HTTP client for the EduCMS API plus the dashboard data-sync layer.
"""

from educms_client.base import Attachment, TableEndpointClient
from educms_client.client import EduCMSClient
from educms_client.exceptions import (
    DataLoadError,
    EduCMSClientError,
    NetworkError,
    NotFoundError,
    PayloadTooLargeError,
    ServerError,
    TimeoutError,
    ValidationError,
)
from educms_client.http import AsyncHTTPClient
from educms_client.notifications import LoggingNotifier, NotificationLevel, Notifier
from educms_client.store import ClientStore
from educms_client.sync import DataSync, gather_all_or_nothing

__version__ = "0.1.0"

__all__ = [
    "Attachment",
    "TableEndpointClient",
    "EduCMSClient",
    "AsyncHTTPClient",
    "DataLoadError",
    "EduCMSClientError",
    "NetworkError",
    "NotFoundError",
    "PayloadTooLargeError",
    "ServerError",
    "TimeoutError",
    "ValidationError",
    "LoggingNotifier",
    "NotificationLevel",
    "Notifier",
    "ClientStore",
    "DataSync",
    "gather_all_or_nothing",
]
