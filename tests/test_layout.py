"""
Tests for sprite layout.

Run with: python -m pytest tests/test_layout.py
"""

from logic.layout import (
    MARGIN,
    WALL_H,
    cell_jitter,
    grid_partition,
    seeded_rand,
    sprite_positions,
)
from logic.models import Claim

W, H = 900, 560


def make_claim(row, col, name="Bot"):
    return Claim(
        id=f"{row}-{col}",
        row=row,
        col=col,
        name=name,
        color="#00ff88",
        claimed_at="2026-01-01T00:00:00.000Z",
    )


def test_seeded_rand_sequence():
    rand = seeded_rand(0)
    assert rand() == 1013904223 / 0xFFFFFFFF
    second = (1013904223 * 1664525 + 1013904223) & 0xFFFFFFFF
    assert rand() == second / 0xFFFFFFFF


def test_seeded_rand_range_and_repeatability():
    a = seeded_rand(12034)
    b = seeded_rand(12034)
    values = [a() for _ in range(100)]
    assert values == [b() for _ in range(100)]
    assert all(0 <= v <= 1 for v in values)


def test_cell_jitter_skips_warm_up_draws():
    rand = seeded_rand(3 * 1000 + 4)
    rand()
    rand()
    expected = (rand() - 0.5, rand() - 0.5)
    assert cell_jitter(3, 4) == expected


def test_grid_partition():
    assert grid_partition(1) == (2, 1)
    assert grid_partition(10) == (4, 3)
    assert grid_partition(100) == (13, 8)


def test_empty_layout():
    assert sprite_positions([], W, H) == []


def test_layout_is_deterministic():
    claims = [make_claim(r, c) for r, c in [(0, 0), (5, 9), (49, 1), (12, 12)]]
    assert sprite_positions(claims, W, H) == sprite_positions(list(claims), W, H)


def test_layout_keeps_order_and_claims():
    claims = [make_claim(r, r) for r in range(7)]
    positions = sprite_positions(claims, W, H)
    assert [p.claim for p in positions] == claims


def test_jitter_follows_the_cell_not_its_neighbours():
    """Swapping a neighbour keeps a claim's position when its slot is unchanged."""
    shared = make_claim(20, 30)
    first = sprite_positions([make_claim(1, 1), shared], W, H)
    second = sprite_positions([make_claim(44, 2), shared], W, H)
    assert first[1].x == second[1].x
    assert first[1].y == second[1].y


def test_positions_stay_inside_safe_margin():
    claims = [make_claim(r, c) for r in range(0, 50, 3) for c in range(0, 50, 4)]
    for pos in sprite_positions(claims, W, H):
        assert MARGIN <= pos.x <= W - MARGIN
        assert WALL_H + MARGIN <= pos.y <= H - MARGIN


def test_single_claim_is_clamped_near_top_left():
    pos = sprite_positions([make_claim(0, 0)], W, H)[0]
    jx, jy = cell_jitter(0, 0)
    usable_w = W - MARGIN * 2
    usable_h = H - WALL_H - MARGIN * 2

    expected_x = max(MARGIN, MARGIN + jx * (usable_w / 2) * 0.6)
    expected_y = max(WALL_H + MARGIN, WALL_H + MARGIN + jy * usable_h * 0.6)
    assert pos.x == expected_x
    assert pos.y == expected_y
