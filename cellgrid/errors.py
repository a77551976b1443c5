"""Exception hierarchy for cellgrid.

The named grid methods never raise on bad coordinates; these errors are
reserved for the opt-in strict paths (strict construction, subscript access,
building a grid from an array).
"""

import cellgrid


class CellGridError(Exception):
    """Base class for all cellgrid-specific exceptions.

    It automatically prepends the cellgrid version to help with debugging reports.
    """

    def __init__(self, message: str):
        self.cellgrid_version = getattr(cellgrid, "__version__", "unknown")
        self.original_message = message
        full_message = f"[cellgrid {self.cellgrid_version}] {message}"
        super().__init__(full_message)


class GridDimensionError(CellGridError):
    """Raised when grid dimensions are invalid.

    Examples: non-integer or non-positive width/height in strict mode, or an
    array that is not two-dimensional.
    """

    def __init__(self, dimensions, reason: str = "must be positive integers"):
        self.dimensions = dimensions
        message = f"Invalid grid dimensions {dimensions}: {reason}."
        super().__init__(message)


class OutOfBoundsError(CellGridError, IndexError):
    """Raised when a coordinate outside the grid is used with subscript access."""

    def __init__(self, pos, dimensions):
        self.pos = pos
        self.dimensions = dimensions
        message = f"Position {pos} is out of bounds for grid dimensions {dimensions}."
        super().__init__(message)
