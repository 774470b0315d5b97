"""Health Check Controller."""

from fastapi import APIRouter

from places.setup.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check 엔드포인트."""
    return {"status": "healthy", "service": get_settings().service_name}


@router.get("/ready")
async def ready() -> dict[str, str]:
    """Readiness check 엔드포인트."""
    return {"status": "ready"}
