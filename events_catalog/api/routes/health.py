"""Health check routes for the FastAPI application."""

from fastapi import APIRouter
from ...config.environment import IS_PRODUCTION_ENVIRONMENT

router = APIRouter(tags=["health"])

@router.get("/health")
async def health_check():
    """Liveness probe."""
    return {
        "status": "OK",
        "environment": "production" if IS_PRODUCTION_ENVIRONMENT else "development",
    }
