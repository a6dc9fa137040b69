"""
Row-major two-dimensional container.

Cells live in a flat numpy object array; (col, row) maps to index
col + width * row. Reads outside the grid return a default instead of
raising, so neighbour scans near the edges need no pre-clamping.
Geometry mismatches on construction, replace_all and reshape raise
GridShapeError.
"""

import copy
from typing import Any, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from ..logging_utils import get_logger
from .errors import GridShapeError, OutOfGridError

logger = get_logger()

# (d_col, d_row): up, down, left, right
ORTHOGONAL_OFFSETS = [(0, -1), (0, 1), (-1, 0), (1, 0)]
DIAGONAL_OFFSETS = [(-1, -1), (1, -1), (-1, 1), (1, 1)]

_MISSING = object()


def _to_cells(values) -> np.ndarray:
    """Copy a flat sequence into a fresh 1-D object array."""
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise GridShapeError(
                f"Flat cells must be one-dimensional, got shape {values.shape}"
            )
        items = values.tolist()
    else:
        items = list(values)

    cells = np.empty(len(items), dtype=object)
    for index, item in enumerate(items):
        cells[index] = item
    return cells


def _cells_equal(a, b) -> bool:
    # array cells compare elementwise, so reduce them to a single bool
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)


def _check_dimensions(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise GridShapeError(f"Dimensions must be non-negative, got {width}x{height}")


class Grid:
    """
    A width x height matrix of arbitrary values.

    Every transformation (copy_part, the splits, the inverted copies) returns
    a new Grid with its own storage.

    Example:
        grid = Grid([1, 1, 1, 2, 2, 2, 3, 3, 3], 3, 3)
        part = grid.copy_part(0, 2, 0, 2)   # 2x2: rows "1 1" / "2 2"
        left, right = grid.split_vertical(1)
    """

    __hash__ = None

    def __init__(self, cells: Iterable[Any], width: int, height: int):
        _check_dimensions(width, height)
        storage = _to_cells(cells)
        if len(storage) != width * height:
            raise GridShapeError(
                f"Got {len(storage)} cells for a {width}x{height} grid "
                f"(expected {width * height})"
            )
        self._width = width
        self._height = height
        self._cells = storage

    @classmethod
    def empty(cls) -> 'Grid':
        """The 0x0 grid."""
        return cls([], 0, 0)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> 'Grid':
        """
        Build a grid from a list of rows.

        Raises:
            GridShapeError: If the rows are not all the same length
        """
        rows = [list(row) for row in rows]
        if not rows:
            return cls.empty()

        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise GridShapeError(
                    f"Row {index} has {len(row)} cells, expected {width}"
                )
        return cls([cell for row in rows for cell in row], width, len(rows))

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Grid':
        """Build a grid from a 2-D numpy array of shape (height, width)."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise GridShapeError(f"Expected a 2-D array, got shape {array.shape}")
        height, width = array.shape
        return cls(array.reshape(-1), width, height)

    # ---- dimensions / storage ---------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the row-major storage (no copy)."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def replace_all(self, cells: Iterable[Any]) -> None:
        """
        Replace every cell, keeping the current dimensions.

        The new cells are validated before anything is swapped in, so a
        failed call leaves the grid as it was.
        """
        storage = _to_cells(cells)
        if len(storage) != self._width * self._height:
            raise GridShapeError(
                f"Got {len(storage)} cells, grid is {self._width}x{self._height}"
            )
        self._cells = storage

    def reshape(self, width: int, height: int) -> None:
        """Reinterpret the same flat cells under new dimensions."""
        _check_dimensions(width, height)
        if width * height != self._width * self._height:
            raise GridShapeError(
                f"Cannot reshape {self._width}x{self._height} to {width}x{height}"
            )
        self._width = width
        self._height = height

    def _matrix(self) -> np.ndarray:
        # (height, width) view over the flat storage
        return self._cells.reshape(self._height, self._width)

    def _in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self._width and 0 <= row < self._height

    # ---- cell access ------------------------------------------------------

    def get(self, col: int, row: int, default: Any = None) -> Any:
        """Value at (col, row), or default if the position is not in the grid."""
        if not self._in_bounds(col, row):
            return default
        return self._cells[col + self._width * row]

    def get_signed(self, col: int, row: int, default: Any = None) -> Any:
        """
        Like get(), for coordinates produced by offset arithmetic.

        Negative coordinates are simply outside the grid and give default,
        they are never wrapped around to the other edge.
        """
        return self.get(col, row, default)

    def set(self, col: int, row: int, value: Any) -> bool:
        """
        Overwrite a single cell.

        Returns:
            True

        Raises:
            OutOfGridError: If (col, row) is outside the grid; no cell changes
        """
        if not self._in_bounds(col, row):
            logger.debug("set(%s, %s) outside %dx%d grid",
                         col, row, self._width, self._height)
            raise OutOfGridError(col, row, self._width, self._height)
        self._cells[col + self._width * row] = value
        return True

    def neighbors(self, col: int, row: int,
                  diagonal: bool = False) -> List[Tuple[Tuple[int, int], Any]]:
        """
        In-grid neighbours of (col, row) as ((col, row), value) pairs.

        Order is up, down, left, right, then the diagonals when requested.
        """
        offsets = ORTHOGONAL_OFFSETS + DIAGONAL_OFFSETS if diagonal else ORTHOGONAL_OFFSETS

        found = []
        for d_col, d_row in offsets:
            n_col, n_row = col + d_col, row + d_row
            value = self.get_signed(n_col, n_row, _MISSING)
            if value is not _MISSING:
                found.append(((n_col, n_row), value))
        return found

    def rows(self) -> Iterator[List[Any]]:
        """Iterate over rows, top to bottom."""
        for row in range(self._height):
            start = row * self._width
            yield self._cells[start:start + self._width].tolist()

    def to_rows(self) -> List[List[Any]]:
        return list(self.rows())

    def to_array(self, dtype=None) -> np.ndarray:
        """Fresh (height, width) array; object dtype unless one is given."""
        matrix = self._matrix()
        if dtype is None:
            return matrix.copy()
        return matrix.astype(dtype)

    # ---- transformations --------------------------------------------------

    def copy_part(self, from_col: int, to_col: int,
                  from_row: int, to_row: int) -> Optional['Grid']:
        """
        Copy of the half-open window [from_col, to_col) x [from_row, to_row).

        Returns None if the window is inverted or reaches past the grid.
        """
        if (from_col < 0 or from_row < 0
                or from_col > to_col or from_row > to_row
                or to_col > self._width or to_row > self._height):
            logger.debug("copy_part(%s, %s, %s, %s) rejected for %dx%d grid",
                         from_col, to_col, from_row, to_row,
                         self._width, self._height)
            return None

        window = self._matrix()[from_row:to_row, from_col:to_col]
        return Grid(window.reshape(-1), to_col - from_col, to_row - from_row)

    def split_vertical(self, column: int) -> Optional[Tuple['Grid', 'Grid']]:
        """
        Split into columns [0, column) and [column, width).

        column must satisfy 0 <= column < width; column 0 gives an empty
        left half. Returns None otherwise.
        """
        if column < 0 or column >= self._width:
            logger.debug("split_vertical(%s) rejected for width %d", column, self._width)
            return None

        left = self.copy_part(0, column, 0, self._height)
        right = self.copy_part(column, self._width, 0, self._height)
        return left, right

    def split_horizontal(self, row: int) -> Optional[Tuple['Grid', 'Grid']]:
        """Split into rows [0, row) and [row, height). Same bounds rule as split_vertical."""
        if row < 0 or row >= self._height:
            logger.debug("split_horizontal(%s) rejected for height %d", row, self._height)
            return None

        top = self.copy_part(0, self._width, 0, row)
        bottom = self.copy_part(0, self._width, row, self._height)
        return top, bottom

    def vertical_inverted_copy(self) -> 'Grid':
        """Mirror left-right: output column c holds input column width-1-c."""
        mirrored = np.fliplr(self._matrix())
        return Grid(mirrored.reshape(-1), self._width, self._height)

    def horizontal_inverted_copy(self) -> 'Grid':
        """Mirror top-bottom: output row r holds input row height-1-r."""
        mirrored = np.flipud(self._matrix())
        return Grid(mirrored.reshape(-1), self._width, self._height)

    # ---- value semantics --------------------------------------------------

    def copy(self) -> 'Grid':
        """Grid with its own storage; the element objects themselves are shared."""
        return Grid(self._cells, self._width, self._height)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        cells = [copy.deepcopy(value, memo) for value in self._cells]
        return Grid(cells, self._width, self._height)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (self._width == other._width
                and self._height == other._height
                and all(_cells_equal(a, b) for a, b in zip(self._cells, other._cells)))

    def __repr__(self):
        return (f"Grid(width={self._width}, height={self._height}, "
                f"cells={self._cells.tolist()!r})")
