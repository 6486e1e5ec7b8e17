"""
Claim validation and sanitization utilities.

This module checks a raw claim submission and turns it into a ClaimProposal,
raising the first failing rule as a ClaimError.

Author: Agent Grid contributors
Date: 2026-10-19
"""

from typing import Any, Dict, Optional

from .config import GRID_SIZE, MAX_NAME_LEN
from .errors import MissingFields, NameTooLong, OutOfBounds
from .identity import in_bounds
from .models import ClaimProposal


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return True


def sanitise_coordinate(value: Any) -> int:
    """Convert a submitted row/col value to an integer.

    Accepts ints, integral floats and decimal strings.

    Args:
        value: Raw coordinate from the request body.

    Returns:
        Integer coordinate.

    Raises:
        OutOfBounds: If the value is not an integer.
    """
    if isinstance(value, bool):
        raise OutOfBounds()
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise OutOfBounds()
        return int(value)
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise OutOfBounds()


def sanitise_optional_text(value: Any) -> Optional[str]:
    """Trim an optional text field, mapping empty or non-text values to None."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def validate_proposal(raw: Dict[str, Any], grid_size: int = GRID_SIZE) -> ClaimProposal:
    """Validate a raw claim submission.

    Rules are checked in order and the first failure is raised:
    required fields, then cell bounds, then name length.

    Args:
        raw: Decoded JSON body of the submission.
        grid_size: Size of the square grid.

    Returns:
        ClaimProposal with trimmed text fields.

    Raises:
        MissingFields: If row/col are absent or name/color are empty.
        OutOfBounds: If the cell lies outside the grid.
        NameTooLong: If the trimmed name exceeds MAX_NAME_LEN.
    """
    if not isinstance(raw, dict):
        raise MissingFields()

    row = raw.get("row")
    col = raw.get("col")
    name = raw.get("name")
    color = raw.get("color")

    if row is None or col is None or _is_blank(name):
        raise MissingFields()
    if not isinstance(color, str) or not color:
        raise MissingFields()

    row = sanitise_coordinate(row)
    col = sanitise_coordinate(col)
    if not in_bounds(row, col, grid_size):
        raise OutOfBounds()

    name = name.strip()
    if len(name) > MAX_NAME_LEN:
        raise NameTooLong()

    return ClaimProposal(
        row=row,
        col=col,
        name=name,
        color=color,
        description=sanitise_optional_text(raw.get("description")),
        url=sanitise_optional_text(raw.get("url")),
    )
