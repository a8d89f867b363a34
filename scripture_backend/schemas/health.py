"""
Health check endpoint schemas.

The health endpoint is PUBLIC and returns a simple status indicator plus
whether the Gemini key is configured.
"""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """
    Response model for GET /health.

    Used by load balancers, monitoring systems, and deployment checks.
    """

    status: str = Field(
        default="ok",
        description="Health status of the API (always 'ok' if responding)",
        examples=["ok"]
    )
    service: str = Field(default="scripture-insights-backend")
    llm_configured: bool = Field(
        ...,
        description="Whether GOOGLE_API_KEY is set (generation endpoints fail without it)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "service": "scripture-insights-backend",
                "llm_configured": True
            }
        }
    )
