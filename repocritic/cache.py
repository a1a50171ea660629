"""
In-memory TTL cache for repository analysis results.

Entries expire lazily: an expired entry is treated as a miss and dropped
when it is read. Nothing sweeps the store in the background, so memory
grows with the number of distinct keys for the life of the process.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600


@dataclass
class CacheEntry:
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at


class AnalysisCache:
    """Thread-safe key/value store with per-entry TTL."""

    def __init__(self, default_ttl: float = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.monotonic):
        self.default_ttl = default_ttl
        self._clock = clock
        self._store: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        """
        Return the cached value for key.

        Args:
            key: Cache key

        Returns:
            The stored value, or None if the key is missing or expired
        """
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if entry.is_expired(self._clock()):
                del self._store[key]
                logger.debug(f"Cache entry expired: {key}")
                return None
            return entry.value

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """
        Store value under key, replacing any previous entry.

        Args:
            key: Cache key
            value: Value to store
            ttl: Time to live in seconds (defaults to the cache's default TTL)
        """
        if ttl is None:
            ttl = self.default_ttl
        with self._lock:
            self._store[key] = CacheEntry(value=value, expires_at=self._clock() + ttl)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


def normalize_cache_key(url: str) -> str:
    """
    Normalize a repository URL for use as a cache key.

    Drops the scheme and trailing slashes and lower-cases the host, so
    ``https://GitHub.com/acme/app/`` and ``github.com/acme/app`` share an
    entry. Path segments keep their case. A URL that urllib cannot split
    (e.g. a malformed IPv6 host) keys on its stripped text.
    """
    url = url.strip()
    if "://" in url:
        try:
            parts = urlsplit(url)
        except ValueError:
            logger.debug(f"Unparseable URL used as raw cache key: {url}")
            return url
        host = parts.netloc.lower()
        path = parts.path
    else:
        host, _, path = url.partition("/")
        host = host.lower()
        path = "/" + path if path else ""
    return (host + path).rstrip("/")
