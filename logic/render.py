"""
Server-side board rendering.

This module paints one animation frame of the board with Pillow: the room
background, then every claim as a bobbing pixel sprite with a name tag.

Author: Agent Grid contributors
Date: 2026-10-19
"""

import io
import math
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageColor, ImageDraw, ImageFont

from .config import CANVAS_HEIGHT, CANVAS_WIDTH
from .layout import WALL_H, sprite_positions
from .models import Claim

TILE = 32
LABEL_BUDGET = 10
ELLIPSIS = "…"
BOB_SPEED = 0.04
BOB_AMPLITUDE = 2
GOLDEN_ANGLE_DEG = 137.5
FALLBACK_COLOR = "#00ff88"

SKIN = (232, 184, 154, 255)
HAIR = (42, 26, 10, 255)
LEGS = (58, 95, 200, 255)
DARK = (17, 17, 17, 255)
WHITE = (255, 255, 255, 255)


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Convert a color string to an RGB tuple.

    Claims may carry any color string, so anything Pillow cannot parse is
    painted with the fallback color.

    Args:
        color: Color string (e.g., "#00ff88", "#fff", "red").

    Returns:
        RGB tuple (r, g, b).
    """
    try:
        return ImageColor.getrgb(color)[:3]
    except (ValueError, AttributeError):
        return ImageColor.getrgb(FALLBACK_COLOR)[:3]


def hex_to_rgba(color: str, alpha: int = 255) -> Tuple[int, int, int, int]:
    return hex_to_rgb(color) + (alpha,)


def lighten(rgb: Tuple[int, int, int], amount: int = 40) -> Tuple[int, int, int, int]:
    return tuple(min(c + amount, 255) for c in rgb) + (255,)


def bob_offset(frame: int, index: int) -> float:
    """Vertical bobbing offset of the sprite at `index` on a given frame.

    Each index is phase-shifted by the golden angle so sprites do not bob
    in unison.
    """
    phase = math.radians(index * GOLDEN_ANGLE_DEG)
    return math.sin(frame * BOB_SPEED + phase) * BOB_AMPLITUDE


def truncate_label(name: str, budget: int = LABEL_BUDGET) -> str:
    """Shorten a name tag to `budget` characters, ending in an ellipsis."""
    if len(name) > budget:
        return name[:budget - 1] + ELLIPSIS
    return name


def load_fonts():
    """Load the tag font, falling back to Pillow's default font."""
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSansMono-Bold.ttf", 9)
    except OSError:
        return ImageFont.load_default()


def _rect(draw: ImageDraw.ImageDraw, x: float, y: float, w: float, h: float, fill):
    draw.rectangle([x, y, x + max(w - 1, 0), y + max(h - 1, 0)], fill=fill)


def _circle(draw: ImageDraw.ImageDraw, cx: float, cy: float, r: float, fill=None, outline=None, width: int = 1):
    draw.ellipse([cx - r, cy - r, cx + r, cy + r], fill=fill, outline=outline, width=width)


def draw_sprite(
    draw: ImageDraw.ImageDraw,
    x: float,
    y: float,
    color: str,
    bob: float,
    scale: float = 1,
) -> None:
    """Draw one pixel-art agent sprite.

    Args:
        draw: ImageDraw object (RGBA mode).
        x: Horizontal centre of the sprite.
        y: Anchor y; the shadow stays here while the body bobs.
        color: Shirt color.
        bob: Vertical bobbing offset for this frame.
        scale: Size multiplier.
    """
    s = scale
    by = y + bob
    rgb = hex_to_rgb(color)
    shirt = rgb + (255,)

    # Shadow
    draw.ellipse([x - 8 * s, y + 13 * s, x + 8 * s, y + 19 * s], fill=(0, 0, 0, 46))

    # Legs and shoes
    _rect(draw, x - 6 * s, by + 8 * s, 5 * s, 8 * s, LEGS)
    _rect(draw, x + 1 * s, by + 8 * s, 5 * s, 8 * s, LEGS)
    _rect(draw, x - 7 * s, by + 14 * s, 6 * s, 3 * s, DARK)
    _rect(draw, x + 1 * s, by + 14 * s, 6 * s, 3 * s, DARK)

    # Body, collar, arms, hands
    _rect(draw, x - 7 * s, by - 2 * s, 14 * s, 12 * s, shirt)
    _rect(draw, x - 2 * s, by - 2 * s, 4 * s, 3 * s, lighten(rgb))
    _rect(draw, x - 11 * s, by, 4 * s, 8 * s, shirt)
    _rect(draw, x + 7 * s, by, 4 * s, 8 * s, shirt)
    _rect(draw, x - 11 * s, by + 7 * s, 4 * s, 4 * s, SKIN)
    _rect(draw, x + 7 * s, by + 7 * s, 4 * s, 4 * s, SKIN)

    # Head and hair
    _rect(draw, x - 6 * s, by - 14 * s, 12 * s, 12 * s, SKIN)
    _rect(draw, x - 6 * s, by - 14 * s, 12 * s, 4 * s, HAIR)
    _rect(draw, x - 7 * s, by - 12 * s, 2 * s, 4 * s, HAIR)
    _rect(draw, x + 5 * s, by - 12 * s, 2 * s, 4 * s, HAIR)

    # Face
    _rect(draw, x - 3 * s, by - 8 * s, 2 * s, 2 * s, DARK)
    _rect(draw, x + 1 * s, by - 8 * s, 2 * s, 2 * s, DARK)
    _rect(draw, x - 2 * s, by - 8 * s, 1 * s, 1 * s, WHITE)
    _rect(draw, x + 2 * s, by - 8 * s, 1 * s, 1 * s, WHITE)
    _rect(draw, x - 1 * s, by - 5 * s, 2 * s, 1 * s, (160, 80, 80, 255))


def draw_name_tag(draw: ImageDraw.ImageDraw, x: float, y: float, name: str, color: str, font) -> None:
    """Draw the truncated name label above a sprite."""
    label = truncate_label(name)
    text_w = draw.textlength(label, font=font)
    draw.rounded_rectangle(
        [x - text_w / 2 - 4, y - 34, x + text_w / 2 + 4, y - 21],
        radius=3,
        fill=(0, 0, 0, 140),
    )
    draw.text((x - text_w / 2, y - 33), label, font=font, fill=hex_to_rgba(color))


def draw_room(draw: ImageDraw.ImageDraw, width: int, height: int) -> None:
    """Paint the static room: tiled floor, floor emblem, wall and furniture."""
    # Floor tiles
    for fy in range(WALL_H, height, TILE):
        for fx in range(0, width, TILE):
            even = (fx // TILE + fy // TILE) % 2 == 0
            fill = (245, 192, 192, 255) if even else (235, 184, 184, 255)
            draw.rectangle([fx, fy, fx + TILE, fy + TILE], fill=fill, outline=(200, 120, 120, 64))

    # Floor emblem
    cx, cy = width / 2, height / 2 + 40
    _circle(draw, cx, cy, 90, outline=(180, 80, 80, 51), width=12)
    draw.line([(cx - 90, cy), (cx + 90, cy)], fill=(180, 80, 80, 38), width=3)
    _circle(draw, cx, cy, 18, outline=(180, 80, 80, 38), width=3)

    # Wall with top and bottom stripes
    draw.rectangle([0, 0, width, WALL_H - 1], fill=(136, 136, 204, 255))
    draw.rectangle([0, 0, width, 7], fill=(102, 102, 170, 255))
    draw.rectangle([0, WALL_H - 6, width, WALL_H - 1], fill=(170, 170, 221, 255))

    # Counters with monitors
    for left in (20, width - 140):
        _rect(draw, left, 18, 120, 44, (204, 102, 102, 255))
        _rect(draw, left + 2, 20, 116, 20, (221, 136, 136, 255))
    for left in (40, width - 80):
        _rect(draw, left, 16, 36, 22, (34, 34, 68, 255))
        _rect(draw, left + 2, 18, 32, 18, (51, 153, 255, 255))
        _rect(draw, left + 2, 18, 8, 4, (255, 255, 255, 77))

    # Door
    _rect(draw, width / 2 - 28, 20, 56, 60, (85, 85, 136, 255))
    _rect(draw, width / 2 - 24, 24, 48, 52, (119, 119, 170, 255))
    _rect(draw, width / 2 - 20, 28, 18, 22, (153, 153, 204, 255))
    _rect(draw, width / 2 + 2, 28, 18, 22, (153, 153, 204, 255))

    # Plants in the floor corners
    plants = [
        (60, height - 60), (width - 60, height - 60),
        (60, WALL_H + 60), (width - 60, WALL_H + 60),
    ]
    for px, py in plants:
        _rect(draw, px - 10, py + 2, 20, 14, (204, 136, 68, 255))
        _circle(draw, px, py - 8, 14, fill=(34, 136, 68, 255))
        _circle(draw, px - 8, py - 12, 10, fill=(51, 170, 85, 255))
        _circle(draw, px + 8, py - 12, 10, fill=(51, 170, 85, 255))

    # Healing station
    _rect(draw, width - 220, WALL_H + 20, 60, 40, (187, 187, 238, 255))
    _circle(draw, width - 190, WALL_H + 30, 12, fill=(255, 136, 136, 255))
    _rect(draw, width - 194, WALL_H + 26, 8, 2, WHITE)
    _rect(draw, width - 192, WALL_H + 24, 4, 6, WHITE)

    # Wall lamps
    for lx in range(120, width - 100, 160):
        _circle(draw, lx, 12, 18, fill=(255, 238, 136, 51))
        _circle(draw, lx, 12, 6, fill=(255, 238, 136, 255))


def render_frame(
    claims: Sequence[Claim],
    frame: int = 0,
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
    font=None,
) -> Image.Image:
    """Render one frame of the board.

    Args:
        claims: Snapshot of claims in listing order.
        frame: Animation frame counter.
        width: Surface width in pixels.
        height: Surface height in pixels.
        font: Tag font; loaded on demand when omitted.

    Returns:
        RGBA image of the whole surface.
    """
    img = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img, "RGBA")
    font = font or load_fonts()

    draw_room(draw, width, height)

    for i, pos in enumerate(sprite_positions(claims, width, height)):
        draw_sprite(draw, pos.x, pos.y, pos.claim.color, bob_offset(frame, i))
        draw_name_tag(draw, pos.x, pos.y, pos.claim.name, pos.claim.color, font)

    return img


def render_sprite_preview(color: str, size: int = 80, scale: float = 1.6) -> Image.Image:
    """Render a single still sprite, as shown in the claim and detail views."""
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img, "RGBA")
    draw_sprite(draw, size / 2, size * 0.6, color, 0, scale)
    return img


def render_frame_png(
    claims: Sequence[Claim],
    frame: int = 0,
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
    font: Optional[ImageFont.ImageFont] = None,
) -> bytes:
    """Render one frame and encode it as PNG bytes."""
    img = render_frame(claims, frame, width, height, font)
    img_bytes = io.BytesIO()
    img.save(img_bytes, format="PNG")
    return img_bytes.getvalue()
