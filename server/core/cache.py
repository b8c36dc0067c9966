"""Response cache — memoizes model answers by request fingerprint."""
import hashlib
import logging
import threading
from datetime import datetime, timezone
from typing import Optional

from cachetools import TTLCache
from pydantic import BaseModel

logger = logging.getLogger(__name__)

_KEY_SEPARATOR = "\x1f"


class CacheEntry(BaseModel):
    """A cached model response"""
    key: str
    value: str
    stored_at: datetime


def make_cache_key(language: str, prompt: str, system_instruction: Optional[str] = None) -> str:
    """
    Deterministic fingerprint of everything that shapes a text response.

    Inputs are joined with a unit separator before hashing so that
    ("a", "bc") and ("ab", "c") never collide.
    """
    raw = _KEY_SEPARATOR.join([language or "", prompt or "", system_instruction or ""])
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()


class ResponseCache:
    """
    Bounded, time-limited key/value store for generated text.

    get() never raises and never touches the network; a miss is None.
    Entries expire after ``ttl_seconds`` and the least recently used
    entry is dropped once ``max_entries`` is reached. Safe to share
    between concurrent requests (last write wins).
    """

    def __init__(self, max_entries: int = 512, ttl_seconds: int = 86400):
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._store: TTLCache = TTLCache(maxsize=max_entries, ttl=ttl_seconds)
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            entry: Optional[CacheEntry] = self._store.get(key)
            if entry is None:
                self._misses += 1
                logger.debug(f"Cache miss for {key[:8]}...")
                return None
            self._hits += 1
        logger.debug(f"Cache hit for {key[:8]}...")
        return entry.value

    def put(self, key: str, value: str) -> None:
        if not value:
            return
        entry = CacheEntry(key=key, value=value, stored_at=datetime.now(timezone.utc))
        with self._lock:
            self._store[key] = entry

    def entry(self, key: str) -> Optional[CacheEntry]:
        """Full entry including its timestamp, without counting as a lookup."""
        with self._lock:
            return self._store.get(key)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
            self._hits = 0
            self._misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> dict:
        with self._lock:
            return {
                "size": len(self._store),
                "max_entries": self.max_entries,
                "ttl_seconds": self.ttl_seconds,
                "hits": self._hits,
                "misses": self._misses,
            }
