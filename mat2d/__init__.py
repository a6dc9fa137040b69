"""
Two-dimensional matrix container for grid puzzles.

Usage:
    from mat2d import Grid

    grid = Grid.from_rows(["#..", ".#.", "..#"])
    top, bottom = grid.split_horizontal(1)
    mirrored = grid.vertical_inverted_copy()
"""
from .core import (
    Grid,
    GridShapeError,
    OutOfGridError,
    split_into_tiles,
    split_into_tiles_dict,
    join_horizontal,
    join_vertical,
    assemble_tiles
)

__version__ = "1.0.0"
__all__ = [
    'Grid',
    'GridShapeError',
    'OutOfGridError',
    'split_into_tiles',
    'split_into_tiles_dict',
    'join_horizontal',
    'join_vertical',
    'assemble_tiles'
]
