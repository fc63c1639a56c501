import asyncio

import pytest

from product_browser.client.constants import DRAWER_TRANSITION_MS
from product_browser.client.drawer import Drawer


class TestDrawer:

    def test_transition_duration_is_the_shared_constant(self):
        assert Drawer().transition_duration == DRAWER_TRANSITION_MS == 300

    @pytest.mark.asyncio
    async def test_close_waits_for_transition(self):
        closed = []
        drawer = Drawer(on_close=lambda: closed.append(True))
        drawer.open()
        assert drawer.is_open

        task = asyncio.create_task(drawer.close())
        await asyncio.sleep(0.1)
        assert not drawer.is_open
        assert closed == []

        await task
        assert closed == [True]

    @pytest.mark.asyncio
    async def test_reopen_during_transition_skips_on_close(self):
        closed = []
        drawer = Drawer(on_close=lambda: closed.append(True), transition_ms=50)
        drawer.open()

        task = asyncio.create_task(drawer.close())
        await asyncio.sleep(0.01)
        drawer.open()
        await task

        assert drawer.is_open
        assert closed == []
