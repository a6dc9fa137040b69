"""Display utilities for grid visualization."""

import matplotlib.pyplot as plt
import numpy as np
from typing import Optional
from pathlib import Path

from ..config import DEFAULT_CELL_SEPARATOR, DEFAULT_CMAP, DEFAULT_DPI
from ..core.grid import Grid


def format_grid(grid: Grid, separator: str = DEFAULT_CELL_SEPARATOR) -> str:
    """
    Render a grid as text, one line per row.

    Args:
        grid: Grid to render
        separator: String placed between cells

    Returns:
        Multi-line string (empty for a grid with no rows)
    """
    return "\n".join(separator.join(str(cell) for cell in row) for row in grid.rows())


def _numeric_image(grid: Grid) -> np.ndarray:
    if grid.width == 0 or grid.height == 0:
        raise ValueError(f"Cannot plot an empty {grid.width}x{grid.height} grid")
    return grid.to_array(dtype=float)


def _draw(ax, image: np.ndarray, cmap: str, title: Optional[str]):
    ax.imshow(image, cmap=cmap, interpolation='nearest')
    if title:
        ax.set_title(title)
    ax.axis('off')


def display_grid(grid: Grid, cmap: str = DEFAULT_CMAP,
                 title: Optional[str] = None,
                 figsize: Optional[tuple] = None):
    """
    Display a numeric grid as an image.

    Args:
        grid: Grid whose cells convert to float
        cmap: Matplotlib colormap
        title: Optional title
        figsize: Figure size (scaled to the grid if not given)
    """
    if figsize is None:
        figsize = (max(2, grid.width * 0.5), max(2, grid.height * 0.5))

    image = _numeric_image(grid)
    fig, ax = plt.subplots(figsize=figsize)
    _draw(ax, image, cmap, title)

    plt.tight_layout()
    plt.show()


def save_grid(grid: Grid, output_path: str, cmap: str = DEFAULT_CMAP,
              title: Optional[str] = None, dpi: int = DEFAULT_DPI):
    """
    Save a numeric grid as an image file.

    Args:
        grid: Grid whose cells convert to float
        output_path: Path to save the figure
        cmap: Matplotlib colormap
        title: Optional title
        dpi: Output DPI
    """
    image = _numeric_image(grid)
    fig, ax = plt.subplots(figsize=(max(2, grid.width * 0.5), max(2, grid.height * 0.5)))
    try:
        _draw(ax, image, cmap, title)
        plt.tight_layout()

        output_dir = Path(output_path).parent
        if output_dir and str(output_dir) != '.':
            output_dir.mkdir(parents=True, exist_ok=True)

        plt.savefig(output_path, dpi=dpi, bbox_inches='tight')
    finally:
        plt.close(fig)


def display_comparison(original: Grid, transformed: Grid,
                       title_original: str = "Original",
                       title_transformed: str = "Transformed",
                       cmap: str = DEFAULT_CMAP,
                       figsize: tuple = (8, 4)):
    """
    Display two grids side by side, e.g. a grid and its mirrored copy.

    Args:
        original: Grid before the transformation
        transformed: Grid after the transformation
        title_original: Title for the left plot
        title_transformed: Title for the right plot
        cmap: Matplotlib colormap
        figsize: Figure size
    """
    left = _numeric_image(original)
    right = _numeric_image(transformed)

    fig, axes = plt.subplots(1, 2, figsize=figsize)

    _draw(axes[0], left, cmap, title_original)
    _draw(axes[1], right, cmap, title_transformed)

    plt.tight_layout()
    plt.show()
