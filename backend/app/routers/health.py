"""
Liveness and readiness probes for the profile registry.
"""
from fastapi import APIRouter, status

from app.config import get_settings
from app.database.connections import ping_database

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Liveness check",
)
async def health_check():
    """Returns 200 while the API process is serving requests."""
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check against the profiles database",
)
async def readiness_check():
    """
    Ping the configured profiles database.

    Registration and login are unavailable while ``mongodb`` is unhealthy;
    the response stays 200 and reports ``degraded``.
    """
    checks = {"api": "healthy", "mongodb": "unknown"}

    try:
        await ping_database()
        checks["mongodb"] = "healthy"
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {type(e).__name__}"

    return {
        "status": "healthy" if all(v == "healthy" for v in checks.values()) else "degraded",
        "database": get_settings().mongo_db_name,
        "checks": checks,
    }
