"""In-memory memoizing wrapper around a backing store."""

import asyncio
import logging
from typing import Any

from docrelay.application.ports import BackingStore

logger = logging.getLogger(__name__)


class MemoizingLookup:
    """Caches successful backing-store reads per key for the lifetime of the instance.

    Misses are never cached: a key the store could not resolve is asked for
    again on the next call. Cached keys are never evicted.
    """

    def __init__(self, backing_store: BackingStore) -> None:
        self._backing_store = backing_store
        self._cache: dict[str, Any] = {}
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_users: dict[str, int] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    async def get(self, key: str) -> Any | None:
        """Return the value for key, reading through to the backing store on a miss."""
        if key in self._cache:
            logger.debug("Cache hit for %r", key)
            return self._cache[key]

        # lookup, backing read and insert happen under one per-key lock
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._lock_users[key] = self._lock_users.get(key, 0) + 1
        try:
            async with lock:
                return await self._read_through(key)
        finally:
            self._release_lock(key)

    async def _read_through(self, key: str) -> Any | None:
        if key in self._cache:
            logger.debug("Cache hit for %r after wait", key)
            return self._cache[key]

        value = await self._backing_store.try_read(key)
        if value is None:
            logger.debug("Backing store has no value for %r", key)
            return None

        self._cache[key] = value
        logger.debug("Cached value for %r", key)
        return value

    def _release_lock(self, key: str) -> None:
        """Forget the key's lock once no task holds or awaits it."""
        self._lock_users[key] -= 1
        if not self._lock_users[key]:
            del self._lock_users[key]
            del self._locks[key]
