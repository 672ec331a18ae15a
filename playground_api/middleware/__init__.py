"""Middleware for the API Playground."""

from .error_handler import (
    APIError,
    ConflictError,
    NotFoundError,
    ValidationAPIError,
    setup_exception_handlers,
)
from .logging import LoggingMiddleware, configure_logging, request_log_fields
from .security import SecurityHeadersMiddleware

__all__ = [
    "APIError",
    "ConflictError",
    "NotFoundError",
    "ValidationAPIError",
    "setup_exception_handlers",
    "LoggingMiddleware",
    "configure_logging",
    "request_log_fields",
    "SecurityHeadersMiddleware",
]
