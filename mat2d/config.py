"""
Package-wide settings.

Edit the constants here, or set MAT2D_LOG_LEVEL in the environment, to change
how the package logs and renders grids.
"""

import logging
import os

# ==== Logging ==============================================================

LOGGER_NAME: str = "mat2d"

DEFAULT_LOG_LEVEL: str = "WARNING"


def resolve_log_level(name: str) -> str:
    """Upper-cased level name, or DEFAULT_LOG_LEVEL if logging doesn't know it."""
    level = name.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


# DEBUG shows every rejected window / split
LOG_LEVEL: str = resolve_log_level(os.environ.get("MAT2D_LOG_LEVEL", DEFAULT_LOG_LEVEL))

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"

# ==== Rendering ============================================================

DEFAULT_CELL_SEPARATOR: str = " "

# Colormap used by display_grid / save_grid
DEFAULT_CMAP: str = "viridis"

DEFAULT_DPI: int = 150
