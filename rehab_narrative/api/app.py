"""FastAPI application for Rehab Narrative."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rehab_narrative import __version__
from rehab_narrative.api.middleware import APIKeyMiddleware, RequestLoggingMiddleware
from rehab_narrative.api.routes import health, narrative
from rehab_narrative.config import get_lexicon, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting Rehab Narrative API")

    # Fail fast on a broken lexicon override
    lexicon = get_lexicon()
    logger.info(f"Lexicon ready with {len(lexicon.deficit_phrases)} deficit phrases")

    yield

    logger.info("Shutting down Rehab Narrative API")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Rehab Narrative API",
        description="Skilled treatment note composer for PT/OT sessions",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(RequestLoggingMiddleware)

    if settings.api_key:
        app.add_middleware(
            APIKeyMiddleware,
            api_key=settings.api_key,
            public_paths=[route.path for route in health.router.routes],
        )

    app.include_router(health.router, tags=["health"])
    app.include_router(narrative.router, prefix="/api/v1", tags=["narrative"])

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "detail": str(exc) if settings.log_level == "DEBUG" else None,
            },
        )

    return app
