"""
Shared singleton dependencies for the application.

The HTTP client, response cache and marketplace store are created once at
startup and reused across requests. The cache in particular must be a
single instance: it is the only state shared between independent calls.
"""
import logging
from typing import Optional

from config.settings import settings
from core.cache import ResponseCache
from core.gateway import AIGateway
from core.intent_router import IntentRouter
from core.portal_tools import PortalTools
from integrations.gemini.client import GeminiClient
from services.community import CommunityRepository
from services.marketplace import MarketRepository

logger = logging.getLogger(__name__)

# Module-level singletons, initialized once via init_dependencies()
_gemini_client: Optional[GeminiClient] = None
_response_cache: Optional[ResponseCache] = None
_gateway: Optional[AIGateway] = None
_market_repo: Optional[MarketRepository] = None
_community_repo: Optional[CommunityRepository] = None


def init_dependencies() -> None:
    """
    Initialize all shared singletons. Called once at application startup.
    """
    global _gemini_client, _response_cache, _gateway, _market_repo, _community_repo

    logger.info("Initializing shared dependencies...")

    # LLM client: single httpx.AsyncClient, reused for all requests
    _gemini_client = GeminiClient()

    _response_cache = ResponseCache(
        max_entries=settings.CACHE_MAX_ENTRIES,
        ttl_seconds=settings.CACHE_TTL_SECONDS,
    )
    _gateway = AIGateway(_gemini_client, _response_cache, offline=settings.OFFLINE_MODE)
    _market_repo = MarketRepository()
    _community_repo = CommunityRepository()

    logger.info(
        f"Dependencies initialized: model={_gemini_client.model}, "
        f"cache={settings.CACHE_MAX_ENTRIES} entries / {settings.CACHE_TTL_SECONDS}s"
    )


async def shutdown_dependencies() -> None:
    """Clean up resources on shutdown."""
    global _gemini_client
    if _gemini_client:
        await _gemini_client.close()
        logger.info("GeminiClient closed")


def get_response_cache() -> ResponseCache:
    if _response_cache is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies() first.")
    return _response_cache


def get_gateway() -> AIGateway:
    if _gateway is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies() first.")
    return _gateway


def get_market_repo() -> MarketRepository:
    if _market_repo is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies() first.")
    return _market_repo


def get_community_repo() -> CommunityRepository:
    if _community_repo is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies() first.")
    return _community_repo


def get_intent_router() -> IntentRouter:
    # Stateless wrapper around the shared gateway; cheap to build per request
    return IntentRouter(get_gateway())


def get_portal_tools() -> PortalTools:
    return PortalTools(get_gateway())
