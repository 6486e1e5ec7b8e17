"""
Configuration module.

This module holds the fixed board constants and the environment-driven
settings (data file location, log level) for the Agent Grid application.

Author: Agent Grid contributors
Date: 2026-10-19
"""

import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Board geometry
GRID_SIZE = 50
TOTAL_CELLS = GRID_SIZE * GRID_SIZE

# Server-enforced bound. The UI lengths are input affordances only.
MAX_NAME_LEN = 30
UI_NAME_LEN = 20
UI_DESCRIPTION_LEN = 80

COLORS = [
    "#00ff88", "#ff0080", "#00d4ff", "#ff6600", "#aa00ff",
    "#ffff00", "#ff3333", "#33ff33", "#ff69b4", "#00ffff",
]

# Drawable surface
CANVAS_WIDTH = 900
CANVAS_HEIGHT = 560


def get_data_path() -> str:
    """Return the path of the JSON file holding every claim.

    Returns:
        Value of CELLS_DATA_PATH, or data/cells.json under the repo root.
    """
    return os.getenv("CELLS_DATA_PATH", os.path.join(BASE_DIR, "data", "cells.json"))


def get_log_level() -> str:
    """Return the configured log level name."""
    return os.getenv("LOG_LEVEL", "INFO").upper()
