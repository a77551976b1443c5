"""cellgrid: a payload-agnostic two-dimensional grid for games and simulations.

Core objects: Grid, Direction, and the OUTSIDE / NOT_VALID / NIL_VALUE markers.
"""

import datetime

__version__ = "1.0.0"
__copyright__ = f"Copyright {datetime.date.today().year} cellgrid contributors"

from cellgrid.collection import CellSequence, GridEntry  # noqa: E402
from cellgrid.directions import Direction, get_all_vectors, get_vector  # noqa: E402
from cellgrid.errors import (  # noqa: E402
    CellGridError,
    GridDimensionError,
    OutOfBoundsError,
)
from cellgrid.grid import DEFAULT_SIZE, Grid, create  # noqa: E402
from cellgrid.sentinels import NIL_VALUE, NOT_VALID, OUTSIDE, Sentinel  # noqa: E402

__all__ = [
    "DEFAULT_SIZE",
    "NIL_VALUE",
    "NOT_VALID",
    "OUTSIDE",
    "CellGridError",
    "CellSequence",
    "Direction",
    "Grid",
    "GridDimensionError",
    "GridEntry",
    "OutOfBoundsError",
    "Sentinel",
    "create",
    "get_all_vectors",
    "get_vector",
]
