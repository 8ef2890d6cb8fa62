"""Cross-cutting concerns: errors, logging, middleware and health checks."""

from .errors import CommerceError, ErrorResponse, InvalidArgumentError, InvalidOperationError, not_found
from .health import HealthStatus, ServiceHealth
from .logging_config import (
    LoggerAdapter,
    generate_request_id,
    get_logger,
    get_request_id,
    set_request_context,
    setup_logging,
)
from .middleware import ExceptionHandlingMiddleware, RequestLoggingMiddleware

__all__ = [
    # Errors
    "CommerceError",
    "ErrorResponse",
    "InvalidArgumentError",
    "InvalidOperationError",
    "not_found",
    # Health checks
    "ServiceHealth",
    "HealthStatus",
    # Logging
    "setup_logging",
    "get_logger",
    "get_request_id",
    "set_request_context",
    "generate_request_id",
    "LoggerAdapter",
    # Middleware
    "RequestLoggingMiddleware",
    "ExceptionHandlingMiddleware",
]
