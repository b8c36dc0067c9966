"""Health check routes"""
from fastapi import APIRouter, Depends

from api.schemas.response_schemas import CacheStatsResponse
from config.settings import settings
from core.cache import ResponseCache
from core.dependencies import get_response_cache

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check"""
    return {
        "status": "ok",
        "service": "sahayak-api",
        "model": settings.GEMINI_MODEL,
        "offline_mode": settings.OFFLINE_MODE,
    }


@router.get("/health/cache", response_model=CacheStatsResponse)
async def cache_health(cache: ResponseCache = Depends(get_response_cache)):
    """Response cache occupancy and hit rate"""
    return cache.stats()
