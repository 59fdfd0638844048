"""FastAPI application entry point."""

import warnings
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.models.responses import ErrorCodes, ErrorResponse
from api.routes import commands_router, health_router
from core.config import API_DEBUG, API_VERSION, DB_PATH
from core.database import create_tables, get_connection
from core.forecast_client import is_configured


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup: make sure the request log exists and credentials are set
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection()
    try:
        create_tables(conn)
    finally:
        conn.close()

    if not is_configured():
        warnings.warn("FORECAST_ACCOUNT_ID / FORECAST_AUTHORIZATION not set")

    yield


app = FastAPI(
    title="Forecast Schedule Bot API",
    description="Chat command webhook that answers with Forecast schedules for people and projects",
    version=API_VERSION,
    debug=API_DEBUG,
    lifespan=lifespan,
)

# CORS middleware (for development)
if API_DEBUG:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# Global exception handler for unexpected errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with standard error format."""
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            code=ErrorCodes.INTERNAL_ERROR,
            details=[],
        ).model_dump(),
    )


# Include routers
app.include_router(health_router)
app.include_router(commands_router)


# Entry point for uvicorn
if __name__ == "__main__":
    import uvicorn

    from core.config import API_HOST, API_PORT

    uvicorn.run(
        "api.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_DEBUG,
    )
