"""Visualization utilities for grids."""
from .display import (
    format_grid,
    display_grid,
    display_comparison,
    save_grid
)
