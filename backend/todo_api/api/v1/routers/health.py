# todo_api/api/v1/routers/health.py
from fastapi import APIRouter

from todo_api.config import settings
from todo_api.utils.datetime_utils import to_iso, utc_now

router = APIRouter(tags=["health"])


@router.get("/")
async def root():
    return {"message": f"Welcome to {settings.APP_NAME}", "status": "running"}


@router.get("/health")
async def health():
    """Liveness check with service metadata."""
    return {
        "status": "UP",
        "timestamp": to_iso(utc_now()),
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


@router.get("/status")
async def status():
    return {"status": "OK"}
