"""
Tests for the recurring frame scheduler.

Run with: python -m pytest tests/test_frame_loop.py
"""

import asyncio

from client.loop import FrameLoop


def test_frame_loop_paints_until_cancelled():
    painted = []

    async def scenario():
        loop = FrameLoop(painted.append, fps=200)
        loop.start()
        assert loop.running
        await asyncio.sleep(0.1)
        loop.cancel()
        assert not loop.running
        count = len(painted)
        await asyncio.sleep(0.05)
        return count

    count = asyncio.run(scenario())

    assert count > 0
    assert len(painted) == count
    assert painted == list(range(1, count + 1))


def test_paint_errors_do_not_stop_the_loop():
    painted = []

    def paint(frame):
        painted.append(frame)
        if frame == 1:
            raise RuntimeError("boom")

    async def scenario():
        loop = FrameLoop(paint, fps=200)
        loop.start()
        await asyncio.sleep(0.1)
        loop.cancel()

    asyncio.run(scenario())
    assert len(painted) > 1


def test_start_twice_is_a_no_op():
    async def scenario():
        loop = FrameLoop(lambda frame: None, fps=100)
        loop.start()
        handle = loop._handle
        loop.start()
        same = loop._handle is handle
        loop.cancel()
        return same

    assert asyncio.run(scenario()) is True
