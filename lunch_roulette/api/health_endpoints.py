"""Root and health endpoints."""
from datetime import datetime, timezone

from fastapi import APIRouter

from lunch_roulette.config.settings import AzureMapsSettings, env_files, get_settings
from lunch_roulette.core.error_handlers import error_handler
from lunch_roulette.core.metrics import snapshot_metrics

router = APIRouter(tags=["health"])


@router.get("/")
async def root():
    """Root endpoint for basic liveness check."""
    settings = get_settings()
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "status": "running"
    }


@router.get("/health")
async def health_check():
    """Health check with upstream configuration, latency and error statistics."""
    return {
        "status": "healthy",
        "version": get_settings().app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "upstream_configured": bool(AzureMapsSettings(_env_file=env_files()).subscription_key),
        "metrics": snapshot_metrics(),
        "error_statistics": error_handler.get_error_statistics(),
    }
