"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from reflect.config import get_settings

router = APIRouter()


@router.get("/")
async def root():
    """Service banner."""
    return {"status": "reflect api running"}


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return {
        "success": True,
        "message": "API is running",
        "timestamp": timestamp.replace("+00:00", "Z"),
    }


@router.get("/health/detailed")
async def detailed_health():
    """Detailed health check with configuration info."""
    settings = get_settings()
    return {
        "success": True,
        "message": "API is running",
        "service": "reflect",
        "version": "0.1.0",
        "config": settings.get_safe_dict(),
    }
