# product_browser/client/query_cache.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Hashable, Optional, Tuple
import asyncio
import logging
import time

from cachetools import TTLCache

from product_browser.client.constants import QUERY_CACHE_MAXSIZE, QUERY_GC_TIME

logger = logging.getLogger(__name__)

QueryKey = Tuple[Hashable, ...]


def default_retry_delay(attempt: int) -> float:
    """Exponential backoff in seconds: 1, 2, 4 ... capped at 30."""
    return min(1.0 * 2 ** attempt, 30.0)


@dataclass
class QueryEntry:
    key: QueryKey
    data: Any = None
    error: Optional[BaseException] = None
    updated_at: Optional[float] = None
    fetch_count: int = 0

    def is_fresh(self, now: float, stale_time: float) -> bool:
        return self.updated_at is not None and now - self.updated_at < stale_time


class QueryCache:
    """
    Client-side response cache keyed by the exact query parameters.

    Each key keeps one entry while it is in use. An entry untouched for ``gc_time``
    seconds is dropped; past ``maxsize`` the least recently used one goes first.
    ``fetch`` serves fresh data without calling ``fn``; ``force=True`` (manual refresh)
    always calls ``fn`` and updates that same entry. Not shared with, nor aware of, the proxy cache.
    """

    def __init__(
        self,
        *,
        timer: Callable[[], float] = time.monotonic,
        retry_delay: Callable[[int], float] = default_retry_delay,
        gc_time: float = QUERY_GC_TIME,
        maxsize: int = QUERY_CACHE_MAXSIZE,
    ):
        self.timer = timer
        self.retry_delay = retry_delay
        self._entries: TTLCache = TTLCache(maxsize=maxsize, ttl=gc_time, timer=timer)

    def entry(self, key: QueryKey) -> Optional[QueryEntry]:
        return self._entries.get(key)

    async def fetch(
        self,
        key: QueryKey,
        fn: Callable[[], Awaitable[Any]],
        *,
        stale_time: float,
        retry: int = 0,
        force: bool = False,
    ) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            entry = QueryEntry(key=key)
        # every use restarts the retention window
        self._entries[key] = entry
        if not force and entry.is_fresh(self.timer(), stale_time):
            logger.debug("query cache_hit key=%s", key)
            return entry.data

        logger.debug("query fetch key=%s force=%s", key, force)
        attempts = retry + 1
        for attempt in range(attempts):
            try:
                data = await fn()
            except Exception as e:
                entry.error = e
                if attempt + 1 >= attempts:
                    raise
                delay = self.retry_delay(attempt)
                logger.info("query key=%s failed (%s), retrying in %.1fs", key, e, delay)
                await asyncio.sleep(delay)
                continue
            entry.data = data
            entry.error = None
            entry.updated_at = self.timer()
            entry.fetch_count += 1
            self._entries[key] = entry
            return data

    async def refetch(self, key: QueryKey, fn: Callable[[], Awaitable[Any]], *, retry: int = 0) -> Any:
        return await self.fetch(key, fn, stale_time=0, retry=retry, force=True)

    def __len__(self) -> int:
        self._entries.expire()
        return len(self._entries)
