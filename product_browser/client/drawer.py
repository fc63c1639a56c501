# product_browser/client/drawer.py
from __future__ import annotations
from typing import Callable, Optional
import asyncio

from product_browser.client.constants import DRAWER_TRANSITION_MS


class Drawer:
    """
    Open/close state of the detail drawer.

    ``is_open`` is the animated state the presentation layer renders. Closing flips it
    right away and calls ``on_close`` only after the transition, so the close
    animation is visible before the drawer leaves the view tree.
    """

    def __init__(
        self,
        on_close: Optional[Callable[[], None]] = None,
        transition_ms: int = DRAWER_TRANSITION_MS,
    ):
        self.on_close = on_close
        self.transition_ms = transition_ms
        self.is_open = False

    @property
    def transition_duration(self) -> int:
        """Milliseconds, for the presentation layer."""
        return self.transition_ms

    def open(self) -> None:
        self.is_open = True

    async def close(self) -> None:
        self.is_open = False
        await asyncio.sleep(self.transition_ms / 1000)
        # reopened during the transition: keep the selection
        if self.is_open:
            return
        if self.on_close is not None:
            self.on_close()
