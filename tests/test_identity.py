"""
Tests for cell identity helpers.

Run with: python -m pytest tests/test_identity.py
"""

import pytest

from logic.config import GRID_SIZE
from logic.errors import MalformedId
from logic.identity import cell_id, in_bounds, parse_cell_id


def test_cell_id_format():
    assert cell_id(0, 0) == "0-0"
    assert cell_id(3, 17) == "3-17"
    assert cell_id(49, 49) == "49-49"


def test_round_trip_over_whole_grid():
    """Every in-bounds cell parses back to its own coordinates."""
    seen = set()
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            value = cell_id(row, col)
            assert parse_cell_id(value) == (row, col)
            seen.add(value)

    # Injective: no two cells share an id
    assert len(seen) == GRID_SIZE * GRID_SIZE


@pytest.mark.parametrize("value", ["", "3", "3-", "-3", "a-b", "1-2-3", "1--2", " 1-2", "1-2 ", "1.0-2", "-1-2", None, 12])
def test_parse_rejects_malformed_ids(value):
    with pytest.raises(MalformedId):
        parse_cell_id(value)


def test_parse_rejects_non_ascii_digits():
    with pytest.raises(MalformedId):
        parse_cell_id("١-٢")


def test_in_bounds():
    assert in_bounds(0, 0) is True
    assert in_bounds(49, 49) is True
    assert in_bounds(50, 0) is False
    assert in_bounds(0, 50) is False
    assert in_bounds(-1, 0) is False
