"""Shared test fixtures and configuration."""
import sys
import os

# Ensure the server package is importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set required environment variables BEFORE any application module is imported.
# These are dummy values used only in tests; no real connections are made.
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key-for-unit-tests")
os.environ.setdefault("RATE_LIMIT_PER_MINUTE", "1000")

import pytest
from unittest.mock import AsyncMock, MagicMock

from core.cache import ResponseCache
from core.gateway import AIGateway
from integrations.gemini.client import GeminiResponse


@pytest.fixture
def gemini_client():
    """Gemini client double; every call answers "Namaste" unless a test says otherwise."""
    client = MagicMock()
    client.generate = AsyncMock(return_value=GeminiResponse(text="Namaste"))
    client.generate_json = AsyncMock(return_value={})
    return client


@pytest.fixture
def cache():
    return ResponseCache(max_entries=16, ttl_seconds=60)


@pytest.fixture
def gateway(gemini_client, cache):
    return AIGateway(gemini_client, cache)
