"""API route modules."""

from .commands import router as commands_router
from .health import router as health_router

__all__ = ["health_router", "commands_router"]
