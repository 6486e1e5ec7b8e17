"""
Cell identity helpers.

Maps a (row, col) pair to its canonical "<row>-<col>" id and back.

Author: Agent Grid contributors
Date: 2026-10-19
"""

import re
from typing import Tuple

from .config import GRID_SIZE
from .errors import MalformedId

_CELL_ID_RE = re.compile(r"([0-9]+)-([0-9]+)")


def cell_id(row: int, col: int) -> str:
    """Build the canonical id of a cell.

    Args:
        row: Row index.
        col: Column index.

    Returns:
        The id string, e.g. "3-17".
    """
    return f"{row}-{col}"


def parse_cell_id(value: str) -> Tuple[int, int]:
    """Split a canonical cell id back into its coordinates.

    Args:
        value: Id string to parse.

    Returns:
        Tuple of (row, col).

    Raises:
        MalformedId: If the value is not two non-negative integers joined by '-'.
    """
    if not isinstance(value, str):
        raise MalformedId(f"Malformed cell id: {value!r}")
    match = _CELL_ID_RE.fullmatch(value)
    if not match:
        raise MalformedId(f"Malformed cell id: {value!r}")
    return int(match.group(1)), int(match.group(2))


def in_bounds(row: int, col: int, grid_size: int = GRID_SIZE) -> bool:
    """Check that a cell lies inside the grid."""
    return 0 <= row < grid_size and 0 <= col < grid_size
