# product_browser/client/scroll_lock.py
from __future__ import annotations
from typing import Protocol


class Viewport(Protocol):
    """The bits of the page the scroll lock touches."""

    scroll_y: float
    body_classes: set[str]
    body_style: dict[str, str]

    def scroll_to(self, x: float, y: float) -> None: ...


LOCK_CLASS = "drawer-open"


def _px(value: float) -> str:
    return f"{value:g}px"


class ScrollLock:
    """
    Freezes the background page while an overlay is shown.

    Locking records the scroll offset and pins the body at ``top: -<offset>px``.
    Unlocking clears the pin and scrolls back to the recorded offset, except when
    that offset is 0.
    """

    def __init__(self, viewport: Viewport):
        self.viewport = viewport
        self.saved_offset: float = 0
        self.locked = False

    def set_locked(self, locked: bool) -> None:
        if locked == self.locked:
            return
        if locked:
            self._lock()
        else:
            self._unlock()

    def _lock(self) -> None:
        vp = self.viewport
        self.saved_offset = vp.scroll_y
        vp.body_classes.add(LOCK_CLASS)
        vp.body_style["position"] = "fixed"
        vp.body_style["top"] = f"-{_px(self.saved_offset)}"
        vp.body_style["width"] = "100%"
        self.locked = True

    def _unlock(self) -> None:
        vp = self.viewport
        vp.body_classes.discard(LOCK_CLASS)
        for prop in ("position", "top", "width"):
            vp.body_style.pop(prop, None)
        self.locked = False
        # 0 is treated as "nothing to restore"
        if self.saved_offset:
            vp.scroll_to(0, self.saved_offset)
