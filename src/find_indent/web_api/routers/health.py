"""
Health Check Router
===================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter

from find_indent import __version__

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
    The engine has no external dependencies, so ready means running.
    """
    return {"status": "ready"}
