# blog_api/api/v1/routers/health.py
import datetime as dt

from fastapi import APIRouter

from blog_api.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    """Liveness probe."""
    return {
        "message": "Blog Platform API is running",
        "timestamp": dt.datetime.now(dt.timezone.utc).isoformat(),
        "environment": settings.env,
    }
