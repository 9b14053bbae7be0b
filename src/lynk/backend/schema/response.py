"""
Response schemas shared by API endpoints.

- ErrorResponse: Error response with error details
- HealthResponse: Health check payload
"""

from typing import Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response with detailed error information."""

    success: bool = Field(False, description="Always false for error responses")
    data: None = Field(None, description="Always null for error responses")
    message: str = Field(..., description="Human-readable error message")
    error: Optional[dict] = Field(
        None,
        description="Error details including code and optional details",
        examples=[
            {"code": "CHANNEL_NOT_FOUND"},
            {"code": "VALIDATION_ERROR", "details": [{"loc": ["body", "text"], "msg": "Field required"}]}
        ]
    )


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="'ok' when the service is up")
    version: str = Field(..., description="Application version")
