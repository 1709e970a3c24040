"""Health check endpoints."""

from fastapi import APIRouter

from rehab_narrative import __version__

router = APIRouter()


@router.get("/health")
async def health_check() -> dict:
    """Basic health check."""
    return {
        "status": "healthy",
        "service": "rehab-narrative",
        "version": __version__,
    }


@router.get("/health/live")
async def liveness_check() -> dict:
    """Liveness check - basic process health."""
    return {"status": "alive"}
