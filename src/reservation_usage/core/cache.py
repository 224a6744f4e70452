# src/reservation_usage/core/cache.py

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Hashable, Optional

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    future: asyncio.Future
    expires_at: float


class CapacityCache:
    """Memoizes the outcome of an async loader per key for a fixed time.

    Concurrent callers asking for the same key while a load is in flight all
    await that single load. A failed load is dropped from the cache so the next
    call starts over. The clock is injectable and must return seconds.
    """

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic, name: Optional[str] = None):
        if ttl <= 0:
            raise ValueError(f"Cache TTL must be positive, got {ttl}.")
        self.ttl = ttl
        self.clock = clock
        self.name = name or "cache"
        self._entries: Dict[Hashable, _Entry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: Hashable, loader: Callable[[], Awaitable[Any]]) -> Any:
        """Return the cached outcome for ``key``, invoking ``loader`` on a miss."""
        now = self.clock()
        entry = self._entries.get(key)
        if entry is not None and now >= entry.expires_at:
            logger.debug("%s: entry for %r expired", self.name, key)
            del self._entries[key]
            entry = None

        if entry is None:
            # Lookup and insertion happen without yielding to the event loop,
            # so a second caller can only ever find this entry.
            logger.debug("%s: loading %r", self.name, key)
            future = asyncio.ensure_future(loader())
            entry = _Entry(future=future, expires_at=now + self.ttl)
            self._entries[key] = entry
            future.add_done_callback(lambda f, k=key, e=entry: self._evict_failed(k, e, f))

        # shield() keeps the shared load running if one of its callers is cancelled.
        return await asyncio.shield(entry.future)

    def _evict_failed(self, key: Hashable, entry: _Entry, future: asyncio.Future) -> None:
        if future.cancelled() or future.exception() is not None:
            if self._entries.get(key) is entry:
                del self._entries[key]
            logger.debug("%s: load of %r failed, entry discarded", self.name, key)

    def invalidate(self, key: Hashable) -> None:
        """Drops the entry for ``key``, if any."""
        self._entries.pop(key, None)

    def clear(self):
        """Clears all entries."""
        self._entries.clear()
