"""Pydantic request/response models for API endpoints."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    forecast_configured: bool
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class CommandRequest(BaseModel):
    """Chat message forwarded by the chat host."""

    text: str
    user: str | None = None


class CommandResponse(BaseModel):
    """Messages to post back to the channel, one per line."""

    messages: list[str]


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    UNAUTHORIZED = "UNAUTHORIZED"
    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
    FORECAST_ERROR = "FORECAST_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
