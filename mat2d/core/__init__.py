"""Grid container and tiling helpers."""
from .errors import GridShapeError, OutOfGridError
from .grid import Grid
from .tiling import (
    split_into_tiles,
    split_into_tiles_dict,
    join_horizontal,
    join_vertical,
    assemble_tiles
)
