"""
Error handling package for the EduCMS backend.

Usage:
    from educms_backend.exceptions import (
        StorageOperationException,
        register_exception_handlers,
    )
"""

from educms_backend.exceptions.exceptions import (
    EduCMSException,
    BadRequestException,
    EmptyBodyException,
    PayloadTooLargeException,
    EndpointNotFoundException,
    StorageOperationException,
    ConfigurationException,
    InternalServerException,
    not_found_message,
)

from educms_backend.exceptions.error_registry import (
    load_error_registry,
    get_error_definition,
    get_all_error_codes,
)

from educms_backend.exceptions.error_handlers import (
    register_exception_handlers,
    educms_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    generic_exception_handler,
)


__all__ = [
    "EduCMSException",
    "BadRequestException",
    "EmptyBodyException",
    "PayloadTooLargeException",
    "EndpointNotFoundException",
    "StorageOperationException",
    "ConfigurationException",
    "InternalServerException",
    "not_found_message",
    "load_error_registry",
    "get_error_definition",
    "get_all_error_codes",
    "register_exception_handlers",
    "educms_exception_handler",
    "validation_exception_handler",
    "http_exception_handler",
    "generic_exception_handler",
]
