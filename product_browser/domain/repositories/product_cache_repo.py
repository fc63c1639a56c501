# product_browser/domain/repositories/product_cache_repo.py
from __future__ import annotations
from typing import Callable, Optional
import time

from cachetools import TTLCache

from product_browser.domain.models.product import CatalogItem
from product_browser.domain.services.constants import PRODUCT_CACHE_PREFIX


class ProductCacheRepo:
    """
    In-process cache of product snapshots keyed by product id.
    Every entry expires ``ttl`` seconds after it was written (absolute, never refreshed on read).
    Nothing invalidates entries explicitly; the store drops the oldest ones past ``maxsize``.
    ``timer`` is injectable so tests can drive expiry with a fake clock.
    """

    def __init__(
        self,
        ttl: int = 60,
        maxsize: int = 1024,
        timer: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self._store: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl, timer=timer)

    @staticmethod
    def key(product_id: int) -> tuple[str, int]:
        return (PRODUCT_CACHE_PREFIX, product_id)

    def get(self, product_id: int) -> Optional[CatalogItem]:
        """Return the cached snapshot, or None when absent or expired."""
        return self._store.get(self.key(product_id))

    def set(self, product_id: int, item: CatalogItem) -> None:
        # last write wins when two misses race on the same id
        self._store[self.key(product_id)] = item

    def __contains__(self, product_id: int) -> bool:
        return self.key(product_id) in self._store

    def __len__(self) -> int:
        """Number of live (unexpired) entries."""
        self._store.expire()
        return len(self._store)
