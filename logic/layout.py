"""
Sprite layout for the board canvas.

Positions every claimed cell on the drawable surface. Claims are spread over
a roughly square grid partition and nudged by a jitter seeded from the cell
coordinates, so a claim keeps its jitter when other claims come and go.

Author: Agent Grid contributors
Date: 2026-10-19
"""

import math
from typing import Callable, List, NamedTuple, Sequence, Tuple

from .models import Claim

# Height of the wall band at the top of the room; nothing is placed there
WALL_H = 80
MARGIN = 48
JITTER_SPREAD = 0.6
WARM_UP_DRAWS = 2

_LCG_MULTIPLIER = 1664525
_LCG_INCREMENT = 1013904223
_UINT32_MASK = 0xFFFFFFFF


class SpritePosition(NamedTuple):
    x: float
    y: float
    claim: Claim


def seeded_rand(seed: int) -> Callable[[], float]:
    """Create a linear congruential generator.

    Args:
        seed: Initial state.

    Returns:
        Function returning the next value in [0, 1] on each call.
    """
    state = seed & _UINT32_MASK

    def rand() -> float:
        nonlocal state
        state = (state * _LCG_MULTIPLIER + _LCG_INCREMENT) & _UINT32_MASK
        return state / _UINT32_MASK

    return rand


def cell_jitter(row: int, col: int) -> Tuple[float, float]:
    """Unit jitter of a cell, each component in [-0.5, 0.5].

    Seeded from the coordinates only, and advanced past the first draws so
    neighbouring seeds do not start out correlated.
    """
    rand = seeded_rand(row * 1000 + col)
    for _ in range(WARM_UP_DRAWS):
        rand()
    return rand() - 0.5, rand() - 0.5


def grid_partition(count: int) -> Tuple[int, int]:
    """Number of (columns, rows) used to spread `count` sprites."""
    cols = math.ceil(math.sqrt(max(count, 1) * 1.5))
    rows = math.ceil(count / cols)
    return cols, rows


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def sprite_positions(claims: Sequence[Claim], width: int, height: int) -> List[SpritePosition]:
    """Compute the screen position of every claim.

    The result depends only on the claims, their order and the surface size.

    Args:
        claims: Claims in listing order.
        width: Surface width in pixels.
        height: Surface height in pixels.

    Returns:
        One SpritePosition per claim, in the same order.
    """
    if not claims:
        return []

    usable_w = width - MARGIN * 2
    usable_h = height - WALL_H - MARGIN * 2
    cols, rows = grid_partition(len(claims))

    positions = []
    for i, claim in enumerate(claims):
        grid_x = (i % cols) / max(cols - 1, 1)
        grid_y = (i // cols) / max(rows - 1, 1)
        unit_x, unit_y = cell_jitter(claim.row, claim.col)
        jitter_x = unit_x * (usable_w / cols) * JITTER_SPREAD
        jitter_y = unit_y * (usable_h / rows) * JITTER_SPREAD

        x = MARGIN + grid_x * usable_w + jitter_x
        y = WALL_H + MARGIN + grid_y * usable_h + jitter_y
        positions.append(SpritePosition(
            x=clamp(x, MARGIN, width - MARGIN),
            y=clamp(y, WALL_H + MARGIN, height - MARGIN),
            claim=claim,
        ))

    return positions
