"""
Pointer hit resolution for the board canvas.

Maps a click on the surface either to the claim under the pointer or to the
grid cell a new claim would be proposed for.

Author: Agent Grid contributors
Date: 2026-10-19
"""

import math
import random
from typing import NamedTuple, Optional, Sequence, Tuple, Union

from .config import COLORS, GRID_SIZE
from .layout import WALL_H, sprite_positions
from .models import Claim

HIT_RADIUS = 20
# Sprites are hit-tested around the body, slightly below the anchor point
BODY_OFFSET_Y = 2


class SpriteHit(NamedTuple):
    claim: Claim


class FloorHit(NamedTuple):
    row: int
    col: int


ClickResult = Union[SpriteHit, FloorHit, None]


def to_surface_coords(
        client_x: float,
        client_y: float,
        rect: Tuple[float, float, float, float],
        width: int,
        height: int,
) -> Optional[Tuple[float, float]]:
    """Convert display coordinates into surface pixels.

    Args:
        client_x: Pointer x in display space.
        client_y: Pointer y in display space.
        rect: Displayed surface box as (left, top, display_width, display_height).
        width: Surface width in pixels.
        height: Surface height in pixels.

    Returns:
        Pointer (x, y) in surface pixels, or None while the surface is not
        displayed (zero width or height).
    """
    left, top, shown_w, shown_h = rect
    if shown_w <= 0 or shown_h <= 0:
        return None
    scale_x = width / shown_w
    scale_y = height / shown_h
    return (client_x - left) * scale_x, (client_y - top) * scale_y


def cell_for_point(x: float, y: float, width: int, height: int, grid_size: int = GRID_SIZE) -> Tuple[int, int]:
    """Rescale a surface point onto the grid.

    Returns:
        Tuple of (row, col), clamped into the grid.
    """
    row = math.floor((y / height) * grid_size)
    col = math.floor((x / width) * grid_size)
    row = max(0, min(grid_size - 1, row))
    col = max(0, min(grid_size - 1, col))
    return row, col


def resolve_click(x: float, y: float, claims: Sequence[Claim], width: int, height: int) -> ClickResult:
    """Work out what a click on the surface refers to.

    Args:
        x: Pointer x in surface pixels.
        y: Pointer y in surface pixels.
        claims: Current snapshot in listing order.
        width: Surface width in pixels.
        height: Surface height in pixels.

    Returns:
        SpriteHit for the first sprite within HIT_RADIUS, FloorHit with the
        proposed cell for a click on the floor, or None inside the wall band.
    """
    for pos in sprite_positions(claims, width, height):
        dx = x - pos.x
        dy = y - (pos.y + BODY_OFFSET_Y)
        if math.hypot(dx, dy) < HIT_RADIUS:
            return SpriteHit(pos.claim)

    if y > WALL_H:
        return FloorHit(*cell_for_point(x, y, width, height))

    return None


def random_color(rng: Optional[random.Random] = None) -> str:
    """Pick a default shirt color for a new proposal."""
    return (rng or random).choice(COLORS)
