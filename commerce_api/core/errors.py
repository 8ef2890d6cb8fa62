"""Error taxonomy shared by the services and the HTTP boundary."""

from datetime import datetime
from typing import Optional

from .schema_base import CamelModel


class CommerceError(Exception):
    """Base exception for commerce API errors."""

    default_message = "An error occurred in the commerce API"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class InvalidArgumentError(CommerceError, ValueError):
    """Malformed or out-of-range caller input. Always client-correctable."""

    default_message = "Invalid argument provided"


class InvalidOperationError(CommerceError):
    """Well-formed request that refers to a missing record or stale state."""

    default_message = "Resource not found or operation invalid"


class ErrorResponse(CamelModel):
    """Uniform error envelope returned for every translated failure."""

    status_code: int
    message: str
    details: Optional[str] = None
    trace_id: str
    timestamp: datetime


def not_found(entity_name: str, entity_id: int) -> InvalidOperationError:
    return InvalidOperationError(f"{entity_name} with ID {entity_id} not found")
