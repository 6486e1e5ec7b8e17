"""
Tests for pointer hit resolution.

Run with: python -m pytest tests/test_interaction.py
"""

import random

from logic.config import COLORS
from logic.interaction import (
    FloorHit,
    SpriteHit,
    cell_for_point,
    random_color,
    resolve_click,
    to_surface_coords,
)
from logic.layout import sprite_positions
from logic.models import Claim

W, H = 900, 560


def make_claim(row, col):
    return Claim(
        id=f"{row}-{col}",
        row=row,
        col=col,
        name="Bot",
        color="#00ff88",
        claimed_at="2026-01-01T00:00:00.000Z",
    )


def test_to_surface_coords_scales_display_box():
    # Canvas shown at half size, offset by (10, 20)
    assert to_surface_coords(110, 70, (10, 20, 450, 280), W, H) == (200, 100)
    assert to_surface_coords(0, 0, (0, 0, W, H), W, H) == (0, 0)


def test_click_on_sprite_opens_claim():
    claims = [make_claim(4, 4), make_claim(10, 20)]
    target = sprite_positions(claims, W, H)[1]

    hit = resolve_click(target.x + 5, target.y + 2, claims, W, H)
    assert hit == SpriteHit(claims[1])


def test_click_on_floor_proposes_cell():
    hit = resolve_click(450, 280, [], W, H)
    assert hit == FloorHit(row=25, col=25)


def test_click_on_wall_does_nothing():
    assert resolve_click(450, 40, [], W, H) is None
    assert resolve_click(450, 80, [], W, H) is None


def test_cell_for_point_is_clamped():
    assert cell_for_point(0, 0, W, H) == (0, 0)
    assert cell_for_point(W, H, W, H) == (49, 49)
    assert cell_for_point(W - 1, H - 1, W, H) == (49, 49)


def test_random_color_from_palette():
    rng = random.Random(7)
    for _ in range(20):
        assert random_color(rng) in COLORS


def test_to_surface_coords_hidden_surface():
    """A surface displayed at zero size cannot be clicked."""
    assert to_surface_coords(10, 10, (0, 0, 0, 280), W, H) is None
    assert to_surface_coords(10, 10, (0, 0, 450, 0), W, H) is None
