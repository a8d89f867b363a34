"""
FastAPI application entry point for the Scripture Insights backend.

This module creates the FastAPI app instance and registers all routers.
Logging is configured once here from LOG_LEVEL; every other module uses
`logging.getLogger(__name__)`.

LOGGING RULES:
- NEVER log the GOOGLE_API_KEY or any other secret
- NEVER log full model output; a short preview is enough to diagnose parse failures
- NEVER log the full personalization payload (age range, situation) at INFO level
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scripture_backend.config import settings
from scripture_backend.routes.generation import router as generation_router
from scripture_backend.routes.health import router as health_router
from scripture_backend.routes.verse import router as verse_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def _get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins based on environment.

    - ENVIRONMENT=production: Uses CORS_ALLOWED_ORIGINS (comma separated)
    - ENVIRONMENT=testing/development: Allows all origins for local dev

    Returns:
        List of allowed origin URLs, or ["*"] outside production.
    """
    if settings.is_production():
        origins = settings.CORS_ALLOWED_ORIGINS
        if origins:
            logger.info(f"CORS configured for production with {len(origins)} allowed origins")
            return origins

        logger.warning(
            "CORS_ALLOWED_ORIGINS not set in production. "
            "No web origins allowed. Set CORS_ALLOWED_ORIGINS for the web client."
        )
        return []

    logger.info(f"CORS configured for {settings.ENVIRONMENT}: allowing all origins")
    return ["*"]


# Create FastAPI app
app = FastAPI(
    title="Scripture Insights API",
    description="Generates context, imagery, interpretations, poems, stories and daily verses for scripture study",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log detailed validation errors for debugging.

    Only malformed bodies land here: every generation field is optional, so
    missing fields are handled by the endpoints themselves.
    """
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "details": jsonable_encoder(exc.errors()),
        }
    )


# Configure CORS with environment-based origins
cors_origins = _get_cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=cors_origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(generation_router)
app.include_router(verse_router)

logger.info("FastAPI app initialized successfully")
