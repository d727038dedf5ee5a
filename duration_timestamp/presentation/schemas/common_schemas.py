"""Common schemas for API responses"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Standard error response schema"""

    detail: Any

    model_config = ConfigDict(
        json_schema_extra={"example": {"detail": "no capture groups were found for a timestamp"}}
    )


class HealthCheckResponse(BaseModel):
    """Health check response schema"""

    status: str = "healthy"
    app: str
    version: str
    timestamp: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "app": "Duration Timestamp",
                "version": "0.1.0",
                "timestamp": "2024-01-01T12:00:00Z",
            }
        }
    )


class WelcomeResponse(BaseModel):
    """Root endpoint response schema"""

    message: str
    description: str
    version: str
    docs: str
    example: Optional[str] = None
