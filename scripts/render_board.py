#!/usr/bin/env python3
"""
Render the stored board to a PNG file.

Usage:
    python scripts/render_board.py board.png --frame 30

Author: Agent Grid contributors
Date: 2026-10-19
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from logic.config import CANVAS_HEIGHT, CANVAS_WIDTH  # noqa: E402
from logic.render import render_frame_png  # noqa: E402
from logic.store import ClaimStore  # noqa: E402


def main(argv=None):
    """Parse arguments and write the image.

    Returns:
        Process exit code.
    """
    parser = argparse.ArgumentParser(description="Render the Agent Grid board to a PNG file.")
    parser.add_argument("output", help="Path of the PNG file to write")
    parser.add_argument("--data", help="Claims file (defaults to CELLS_DATA_PATH)")
    parser.add_argument("--frame", type=int, default=0, help="Animation frame to render")
    parser.add_argument("--width", type=int, default=CANVAS_WIDTH)
    parser.add_argument("--height", type=int, default=CANVAS_HEIGHT)
    args = parser.parse_args(argv)

    claims = ClaimStore(args.data).list_all()
    png = render_frame_png(claims, args.frame, args.width, args.height)
    Path(args.output).write_bytes(png)
    print(f"Rendered {len(claims)} claims to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
