"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.models.responses import HealthResponse
from core.config import API_VERSION
from core.forecast_client import is_configured

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns 200 if healthy, 503 if Forecast credentials are missing.
    """
    timestamp = datetime.now(timezone.utc).isoformat()

    if is_configured():
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            forecast_configured=True,
            timestamp=timestamp,
        )
    else:
        return JSONResponse(
            status_code=503,
            content=HealthResponse(
                status="unhealthy",
                version=API_VERSION,
                forecast_configured=False,
                timestamp=timestamp,
                error="Forecast credentials not configured",
            ).model_dump(),
        )
