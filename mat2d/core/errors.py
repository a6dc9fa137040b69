"""Exceptions raised by Grid operations."""


class GridShapeError(ValueError):
    """
    Cell count does not match the requested dimensions.

    Raised by construction, replace_all, reshape and the join helpers. This is
    a bug in the caller's geometry, not a condition to recover from.
    """


class OutOfGridError(IndexError):
    """Write to a coordinate outside the grid."""

    def __init__(self, col, row, width, height):
        super().__init__(f"({col}, {row}) is not in a {width}x{height} grid")
        self.col = col
        self.row = row
