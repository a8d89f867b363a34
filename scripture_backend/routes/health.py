"""
Health check route for the Scripture Insights backend.

This endpoint is PUBLIC and provides a simple status check for load
balancers, monitoring, and deployment verification. It never calls Gemini.
"""

import logging

from fastapi import APIRouter

from scripture_backend.config import settings
from scripture_backend.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

# Mounted at root level in main.py
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns a status indicator and whether the Gemini API key is configured.",
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok",
            "service": "scripture-insights-backend",
            "llm_configured": true
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(llm_configured=bool(settings.GOOGLE_API_KEY))
