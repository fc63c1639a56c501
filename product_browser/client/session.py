# product_browser/client/session.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Literal, Optional
import asyncio
import logging

from product_browser.client.api import ProductsApi, ProductsApiError
from product_browser.client.constants import PRODUCT_RETRY, PRODUCTS_RETRY, SEARCH_DEBOUNCE_MS
from product_browser.client.debounce import Debouncer
from product_browser.client.drawer import Drawer
from product_browser.client.formatters import format_rating, format_stock
from product_browser.client.pagination import Pagination
from product_browser.client.queries import fetch_product, fetch_products
from product_browser.client.query_cache import QueryCache
from product_browser.client.scroll_lock import ScrollLock, Viewport
from product_browser.domain.models.product import CatalogItem, CatalogItemSummary

logger = logging.getLogger(__name__)

ViewStatus = Literal["loading", "error", "empty", "ready"]


def _log_task_failure(task: asyncio.Task) -> None:
    if not task.cancelled() and task.exception() is not None:
        logger.error("Background products load failed", exc_info=task.exception())


@dataclass(frozen=True)
class ListView:
    status: ViewStatus
    items: List[CatalogItemSummary] = field(default_factory=list)
    page: int = 1
    total_pages: int = 0
    error: Optional[str] = None

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


@dataclass(frozen=True)
class DetailView:
    status: Literal["loading", "error", "ready"]
    product: Optional[CatalogItem] = None
    error: Optional[str] = None

    @property
    def rating(self) -> Optional[dict[str, str]]:
        return format_rating(self.product.rating) if self.product else None

    @property
    def stock_label(self) -> Optional[str]:
        return format_stock(self.product.stock) if self.product else None

    @property
    def can_add_to_cart(self) -> bool:
        return self.product is not None and self.product.stock != 0


class BrowsingSession:
    """
    State of one product browsing page: search box, paginated grid, detail drawer.

    - typing updates ``search`` at once; list queries follow the debounced copy
    - a new debounced search resets the page to 1 and reloads the list
    - selecting a product opens the drawer and locks background scroll;
      closing clears the selection after the drawer transition
    - a list response is dropped when page or search changed while it was in flight
    """

    def __init__(
        self,
        api: ProductsApi,
        *,
        cache: Optional[QueryCache] = None,
        viewport: Optional[Viewport] = None,
        debounce_ms: int = SEARCH_DEBOUNCE_MS,
        products_retry: int = PRODUCTS_RETRY,
        product_retry: int = PRODUCT_RETRY,
    ):
        self.api = api
        self.cache = cache or QueryCache()
        self.products_retry = products_retry
        self.product_retry = product_retry
        self.search = ""
        self.debounced = Debouncer("", delay_ms=debounce_ms, on_commit=self._on_search_committed)
        self.pagination = Pagination()
        self.selected_id: Optional[int] = None
        self.drawer = Drawer(on_close=self._clear_selection)
        self.scroll_lock = ScrollLock(viewport) if viewport is not None else None
        self.list_view = ListView(status="loading")
        self._list_generation = 0
        self._last_search = ""
        # list load started by the latest search commit
        self.search_task: Optional[asyncio.Task] = None

    # --- search & pagination ------------------------------------------------

    @property
    def debounced_search(self) -> str:
        return self.debounced.value

    def type_search(self, text: str) -> None:
        self.search = text
        self.debounced.push(text)

    def _on_search_committed(self, value: str) -> None:
        if value == self._last_search:
            return
        self._last_search = value
        self.pagination.reset()
        self.search_task = asyncio.get_running_loop().create_task(self.load_products())
        self.search_task.add_done_callback(_log_task_failure)

    async def load_products(self, *, force: bool = False) -> ListView:
        self._list_generation += 1
        generation = self._list_generation
        page, search = self.pagination.page, self.debounced_search
        self.list_view = ListView(status="loading", page=page)

        try:
            data = await fetch_products(
                self.cache, self.api, page=page, search=search, force=force, retry=self.products_retry
            )
        except ProductsApiError as e:
            view = ListView(status="error", page=page, error=e.message or "Failed to load products")
        else:
            if not data.items:
                view = ListView(status="empty", page=data.page, total_pages=data.total_pages)
            else:
                view = ListView(status="ready", items=list(data.items), page=data.page, total_pages=data.total_pages)

        superseded = generation != self._list_generation or (page, search) != (
            self.pagination.page, self.debounced_search
        )
        if superseded:
            logger.debug("Discarding stale products response page=%s search=%r", page, search)
            return self.list_view
        self.list_view = view
        return view

    async def retry(self) -> ListView:
        """Manual refresh of the current list query, bypassing freshness."""
        return await self.load_products(force=True)

    async def go_to_page(self, page: int) -> ListView:
        self.pagination.set_page(page)
        return await self.load_products()

    async def next_page(self) -> ListView:
        self.pagination.next_page()
        return await self.load_products()

    async def previous_page(self) -> ListView:
        self.pagination.previous_page()
        return await self.load_products()

    # --- detail drawer ------------------------------------------------------

    def select(self, product_id: int) -> None:
        self.selected_id = product_id
        self.drawer.open()
        if self.scroll_lock is not None:
            self.scroll_lock.set_locked(True)

    async def close_detail(self) -> None:
        await self.drawer.close()

    def _clear_selection(self) -> None:
        self.selected_id = None
        if self.scroll_lock is not None:
            self.scroll_lock.set_locked(False)

    async def load_detail(self, *, force: bool = False) -> Optional[DetailView]:
        product_id = self.selected_id
        if product_id is None:
            return None
        try:
            product = await fetch_product(
                self.cache, self.api, product_id, force=force, retry=self.product_retry
            )
        except ProductsApiError as e:
            return DetailView(status="error", error=e.message)
        return DetailView(status="ready", product=product)
