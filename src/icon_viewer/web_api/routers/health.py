"""
Health Check Router
==================
Endpoints for health checks and readiness checks.
"""
from fastapi import APIRouter

from icon_viewer import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    The viewer has no backing services, so it is ready once it is up.
    """
    return {"status": "ready"}
