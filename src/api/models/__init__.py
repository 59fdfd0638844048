"""API Pydantic models."""

from .responses import (
    CommandRequest,
    CommandResponse,
    ErrorCodes,
    ErrorResponse,
    HealthResponse,
)

__all__ = ["HealthResponse", "CommandRequest", "CommandResponse", "ErrorResponse", "ErrorCodes"]
