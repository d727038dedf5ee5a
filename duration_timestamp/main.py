"""Duration Timestamp - FastAPI Application

Parse, stringify and replace duration timestamps such as 1:02:03 and 1h 2m 3s.
"""

from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from duration_timestamp.core.config import settings
from duration_timestamp.core.logging_config import configure_logging
from duration_timestamp.presentation.api.timestamps import router as timestamps_router
from duration_timestamp.presentation.schemas.common_schemas import (
    HealthCheckResponse,
    WelcomeResponse,
)


def create_application() -> FastAPI:
    """Create and configure FastAPI application"""

    configure_logging()

    app = FastAPI(
        title=settings.app_name,
        description="Parse and stringify duration timestamps (such as hh:mm:ss and HhMmSs)",
        version=settings.version,
        debug=settings.debug,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(timestamps_router, prefix="/timestamps", tags=["Timestamps"])

    return app


# Create FastAPI app
app = create_application()


@app.get("/", response_model=WelcomeResponse)
async def root() -> WelcomeResponse:
    """Root endpoint"""
    return WelcomeResponse(
        message=f"Welcome to {settings.app_name}!",
        description="Parse and stringify duration timestamps (such as hh:mm:ss and HhMmSs)",
        version=settings.version,
        docs="/docs",
        example="POST /timestamps/parse {\"text\": \"1h 2m 3s\"}",
    )


@app.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint"""
    return HealthCheckResponse(
        app=settings.app_name,
        version=settings.version,
        timestamp=datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    )


def start() -> None:
    """Start the server"""
    uvicorn.run(
        "duration_timestamp.main:app",
        host="127.0.0.1",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
