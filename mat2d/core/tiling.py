"""Cutting a grid into equal tiles and putting tiles back together."""

from typing import Dict, List, Optional

import numpy as np

from ..logging_utils import get_logger
from .errors import GridShapeError
from .grid import Grid

logger = get_logger()


def split_into_tiles(grid: Grid, tiles_across: int,
                     tiles_down: Optional[int] = None) -> List[Grid]:
    """
    Split grid into tiles_across x tiles_down equal tiles.

    Args:
        grid: Grid to split
        tiles_across: Number of tiles per row
        tiles_down: Number of tiles per column (defaults to tiles_across)

    Returns:
        List of tiles in row-major order. Columns and rows that don't fill a
        whole tile on the right/bottom edge are dropped.
    """
    if tiles_down is None:
        tiles_down = tiles_across

    if tiles_across <= 0 or tiles_down <= 0:
        raise ValueError(f"Tile counts must be positive, got {tiles_across}x{tiles_down}")
    if tiles_across > grid.width or tiles_down > grid.height:
        raise ValueError(
            f"Cannot cut a {grid.width}x{grid.height} grid into "
            f"{tiles_across}x{tiles_down} tiles"
        )

    tile_w = grid.width // tiles_across
    tile_h = grid.height // tiles_down
    logger.debug("Splitting %dx%d grid into %dx%d tiles of %dx%d",
                 grid.width, grid.height, tiles_across, tiles_down, tile_w, tile_h)

    tiles = []
    for i in range(tiles_down):
        for j in range(tiles_across):
            tile = grid.copy_part(j * tile_w, (j + 1) * tile_w,
                                  i * tile_h, (i + 1) * tile_h)
            tiles.append(tile)

    return tiles


def split_into_tiles_dict(grid: Grid, tiles_across: int,
                          tiles_down: Optional[int] = None) -> Dict[int, Grid]:
    """Same as split_into_tiles, keyed by tile index."""
    tiles = split_into_tiles(grid, tiles_across, tiles_down)
    return {idx: tile for idx, tile in enumerate(tiles)}


def join_horizontal(left: Grid, right: Grid) -> Grid:
    """Place right next to left. Heights must match."""
    if left.height != right.height:
        raise GridShapeError(
            f"Cannot join heights {left.height} and {right.height} side by side"
        )
    merged = np.hstack([left.to_array(), right.to_array()])
    return Grid(merged.reshape(-1), left.width + right.width, left.height)


def join_vertical(top: Grid, bottom: Grid) -> Grid:
    """Place bottom under top. Widths must match."""
    if top.width != bottom.width:
        raise GridShapeError(
            f"Cannot stack widths {top.width} and {bottom.width}"
        )
    merged = np.vstack([top.to_array(), bottom.to_array()])
    return Grid(merged.reshape(-1), top.width, top.height + bottom.height)


def assemble_tiles(tiles: List[Grid], tiles_across: int) -> Grid:
    """
    Rebuild a grid from row-major tiles, the inverse of split_into_tiles.

    Args:
        tiles: Tiles in row-major order
        tiles_across: Number of tiles per row

    Returns:
        The assembled grid (empty grid for an empty tile list)
    """
    if tiles_across <= 0:
        raise ValueError(f"tiles_across must be positive, got {tiles_across}")
    if len(tiles) % tiles_across:
        raise GridShapeError(
            f"{len(tiles)} tiles do not fill rows of {tiles_across}"
        )
    if not tiles:
        return Grid.empty()

    bands = []
    for start in range(0, len(tiles), tiles_across):
        band = tiles[start]
        for tile in tiles[start + 1:start + tiles_across]:
            band = join_horizontal(band, tile)
        bands.append(band)

    result = bands[0]
    for band in bands[1:]:
        result = join_vertical(result, band)
    return result
