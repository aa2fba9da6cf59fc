"""Health check endpoint."""
from fastapi import APIRouter, Depends

from placement_bot.config import Settings, get_settings

router = APIRouter()


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)):
    """
    Liveness check.

    Reports whether the OpenRouter key is configured; never calls upstream.
    """
    return {
        "status": "healthy",
        "service": "placement-bot",
        "checks": {
            "openrouter_api_key": "configured" if settings.has_api_key else "missing",
        },
    }
