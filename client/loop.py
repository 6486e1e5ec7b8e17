"""
Recurring frame scheduler.

FrameLoop repaints on the asyncio event loop at a fixed interval and hands
out an explicit handle for cancellation, like a display-refresh callback.

Author: Agent Grid contributors
Date: 2026-10-19
"""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_FPS = 60


class FrameLoop:
    """Call `paint(frame)` once per tick until cancelled.

    Attributes:
        frame: Number of ticks painted so far.
        interval: Seconds between ticks.
    """

    def __init__(
        self,
        paint: Callable[[int], None],
        fps: float = DEFAULT_FPS,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.paint = paint
        self.interval = 1 / fps
        self.frame = 0
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self):
        """Schedule the first tick. Starting a running loop is a no-op."""
        if self.running:
            return
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        self._handle = self._loop.call_later(self.interval, self._tick)

    def cancel(self):
        """Stop repainting."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _tick(self):
        self.frame += 1
        try:
            self.paint(self.frame)
        except Exception:
            # A bad frame must not stop the animation
            logger.exception("Paint failed on frame %d", self.frame)
        if self._handle is not None:
            self._handle = self._loop.call_later(self.interval, self._tick)
