# product_browser/client/debounce.py
from __future__ import annotations
from typing import Callable, Generic, Optional, TypeVar
import asyncio

from product_browser.client.constants import SEARCH_DEBOUNCE_MS

T = TypeVar("T")


class Debouncer(Generic[T]):
    """
    Delayed copy of a rapidly-changing value.

    ``push`` records the latest raw value and (re)starts the quiet-period timer;
    ``value`` only changes once ``delay_ms`` passes with no further push.
    ``on_commit`` is called with each committed value. Needs a running event loop.
    """

    def __init__(
        self,
        initial: T,
        delay_ms: int = SEARCH_DEBOUNCE_MS,
        on_commit: Optional[Callable[[T], None]] = None,
    ):
        self.value: T = initial
        self.delay_ms = delay_ms
        self.on_commit = on_commit
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def push(self, value: T) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay_ms / 1000, self._commit, value)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _commit(self, value: T) -> None:
        self._handle = None
        self.value = value
        if self.on_commit is not None:
            self.on_commit(value)
