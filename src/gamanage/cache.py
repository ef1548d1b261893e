"""
Response cache

Memoizes API listings by key so repeated lookups for the same account, property or
view do not hit the API again.
"""

import logging
import threading
from typing import Any, Callable, Dict, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def cache_key(kind: str, *ids: Any) -> str:
    """Build a cache key such as 'goals:1001:UA-1001-1:2001'"""
    return ":".join([kind, *(str(entity_id) for entity_id in ids)])


class ResponseCache:
    """Thread-safe key → result memo"""

    def __init__(self):
        self._entries: Dict[str, Any] = {}
        self._key_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    def get_or_fetch(self, key: str, fetch: Callable[[], T]) -> T:
        """
        Return the cached value for key, fetching and storing it on a miss

        Concurrent callers for the same key wait for a single fetch; fetches for
        different keys run independently. A fetch that raises leaves the cache
        unchanged.
        """
        with self._lock:
            if key in self._entries:
                logger.debug("Cache hit: %s", key)
                return self._entries[key]
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            with self._lock:
                if key in self._entries:
                    logger.debug("Cache hit after wait: %s", key)
                    return self._entries[key]

            logger.debug("Cache miss: %s", key)
            value = fetch()
            with self._lock:
                self._entries[key] = value
            return value

    def discard(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
