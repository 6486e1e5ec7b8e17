"""
Board viewer.

BoardView ties the pieces together: it keeps a BoardState, repaints the
latest snapshot on every frame, routes clicks through the hit resolver and
drives the submit flow against the cells API.

Author: Agent Grid contributors
Date: 2026-10-19
"""

import asyncio
import logging
import random
from typing import Optional, Tuple

import aiohttp
from PIL import Image

from logic.config import CANVAS_HEIGHT, CANVAS_WIDTH
from logic.interaction import FloorHit, SpriteHit, random_color, resolve_click, to_surface_coords
from logic.render import load_fonts, render_frame, render_sprite_preview

from .api import CellsClient, ClaimRejected
from .loop import DEFAULT_FPS, FrameLoop
from .state import BoardState, Modal

logger = logging.getLogger(__name__)

NETWORK_ERROR = "Network error"


class BoardView:
    """One viewer of the shared board.

    Attributes:
        state: Claim-flow state and snapshot.
        surface: Last painted frame.
        width: Surface width in pixels.
        height: Surface height in pixels.
    """

    def __init__(
        self,
        api: CellsClient,
        width: int = CANVAS_WIDTH,
        height: int = CANVAS_HEIGHT,
        fps: float = DEFAULT_FPS,
        refresh_interval: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ):
        self.api = api
        self.width = width
        self.height = height
        self.state = BoardState()
        self.surface: Optional[Image.Image] = None
        self.refresh_interval = refresh_interval
        self._rng = rng or random.Random()
        self._font = load_fonts()
        self._frames = FrameLoop(self.paint, fps=fps)
        self._poller: Optional[asyncio.Task] = None

    @property
    def frame(self) -> int:
        return self._frames.frame

    async def start(self):
        """Fetch the board once, then start painting (and polling if configured)."""
        await self.refresh()
        self._frames.start()
        if self.refresh_interval:
            self._poller = asyncio.create_task(self._poll())

    async def close(self):
        """Tear the view down: stop painting and polling."""
        self._frames.cancel()
        if self._poller is not None:
            self._poller.cancel()
            try:
                await self._poller
            except asyncio.CancelledError:
                pass
            self._poller = None

    async def _poll(self):
        while True:
            await asyncio.sleep(self.refresh_interval)
            await self.refresh()

    async def refresh(self) -> bool:
        """Replace the snapshot with the server listing.

        A failed fetch keeps the previous snapshot.

        Returns:
            True if the snapshot was replaced.
        """
        try:
            claims = await self.api.fetch_cells()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError, KeyError) as e:
            logger.warning("Failed to fetch cells: %s", e)
            return False
        finally:
            self.state.loading = False
        self.state.replace_snapshot(claims)
        return True

    def paint(self, frame: int) -> Image.Image:
        """Render the current snapshot into the surface."""
        self.surface = render_frame(self.state.claims, frame, self.width, self.height, self._font)
        return self.surface

    def preview(self) -> Optional[Image.Image]:
        """Render the still sprite shown in the open proposal or detail view.

        The proposal preview appears once a name has been typed.

        Returns:
            Preview image, or None when there is nothing to show.
        """
        state = self.state
        if state.modal in (Modal.PROPOSAL_OPEN, Modal.SUBMITTING) and state.proposal is not None:
            if not state.proposal.name:
                return None
            return render_sprite_preview(state.proposal.color, size=60, scale=1.2)
        if state.modal == Modal.DETAIL_OPEN and state.detail is not None:
            return render_sprite_preview(state.detail.color)
        return None

    def click(self, client_x: float, client_y: float, rect: Optional[Tuple[float, float, float, float]] = None):
        """Handle a pointer click.

        Args:
            client_x: Pointer x in display space.
            client_y: Pointer y in display space.
            rect: Displayed surface box (left, top, width, height). Defaults
                to the surface shown at its natural size at the origin.

        Returns:
            The resolved SpriteHit, FloorHit or None.
        """
        if self.state.modal != Modal.IDLE:
            return None

        rect = rect or (0, 0, self.width, self.height)
        point = to_surface_coords(client_x, client_y, rect, self.width, self.height)
        if point is None:
            return None
        x, y = point
        hit = resolve_click(x, y, self.state.claims, self.width, self.height)

        if isinstance(hit, SpriteHit):
            self.state.open_detail(hit.claim)
        elif isinstance(hit, FloorHit):
            self.state.open_proposal(hit.row, hit.col, random_color(self._rng))
        return hit

    async def submit(self) -> bool:
        """Submit the open proposal.

        The frame loop keeps painting the current snapshot while the request
        is in flight.

        Returns:
            True if the claim was accepted.
        """
        if not self.state.can_submit:
            return False

        payload = self.state.begin_submit()
        try:
            claim = await self.api.submit_claim(payload)
        except ClaimRejected as e:
            logger.info("Claim on %s-%s rejected: %s", payload["row"], payload["col"], e.message)
            self.state.submit_failed(e.message)
            return False
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError, KeyError) as e:
            logger.error("Claim submission failed: %s", e)
            self.state.submit_failed(NETWORK_ERROR)
            return False

        self.state.submit_succeeded(claim)
        return True
