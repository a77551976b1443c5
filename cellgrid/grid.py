"""Dense two-dimensional grid of arbitrary payloads.

The grid stores one value per ``(x, y)`` coordinate, with ``x`` addressing the
vertical axis and ``y`` the horizontal axis, both zero based from the top-left
corner. On top of plain cell access it offers:
- neighbor queries in the nine named directions
- straight line traversal until the edge of the grid
- bulk export/import of ``(x, y, value)`` triples
- resizing while keeping the overlapping cells

The named methods never raise on bad input. Invalid coordinates, unknown
directions and malformed bulk data result in None, an empty sequence or a
no-op. Subscript access (``grid[x, y]``) is the strict alternative and raises
:class:`~cellgrid.errors.OutOfBoundsError`.

Example::

    grid = create(8, 8, " ")
    grid.populate([(4, 4, "O"), (4, 5, "X"), (5, 4, "X"), (5, 5, "O")])
    for x, y, value in grid.traverse(0, 0, Direction.BOTTOM_RIGHT):
        print(f"{x}, {y}: {value}")
    grid.resize(4, 4)
    grid.get_cell(3, 3)

"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Mapping
from numbers import Integral
from typing import Any, Generic, TypeVar

import numpy as np

from cellgrid.collection import CellSequence, GridEntry
from cellgrid.directions import NEIGHBOR_OFFSETS, get_vector
from cellgrid.errors import GridDimensionError, OutOfBoundsError
from cellgrid.grid_logging import create_module_logger, method_logger
from cellgrid.sentinels import NIL_VALUE, OUTSIDE

__all__ = ["DEFAULT_SIZE", "Grid", "create"]

DEFAULT_SIZE = 4

V = TypeVar("V")

_grid_logger = create_module_logger()


def _is_index(value) -> bool:
    # bool is an Integral subclass but never a coordinate
    return isinstance(value, Integral) and not isinstance(value, bool)


def _is_dimension(value) -> bool:
    return _is_index(value) and value > 0


def _as_index(value):
    # plain ints, so offsets never overflow unsigned numpy scalars
    return operator.index(value) if _is_index(value) else value


def _same_value(value, other) -> bool:
    if value is other:
        return True
    if isinstance(value, np.ndarray) or isinstance(other, np.ndarray):
        return bool(np.array_equal(value, other))
    result = value == other
    if isinstance(result, bool | np.bool_):
        return bool(result)
    return bool(np.array_equal(value, other))


def _is_batch(data) -> bool:
    return isinstance(data, Iterable) and not isinstance(
        data, str | bytes | bytearray | Mapping
    )


def _allocate(width: int, height: int, default_value) -> np.ndarray:
    # fill() stores the default as a single object even if it is itself a sequence
    cells = np.empty((width, height), dtype=object)
    cells.fill(default_value)
    return cells


class Grid(Generic[V]):
    """A dense rectangular container of cells.

    Attributes:
        width (int): number of rows, the extent of the ``x`` axis
        height (int): number of columns, the extent of the ``y`` axis
        default_value: the value new and reset cells receive

    Notes:
        Batch queries return lazy :class:`~cellgrid.collection.CellSequence` views,
        which read the grid again on every iteration. Take a ``list`` of the view
        if the grid is going to change while you use the results.

    """

    @method_logger(__name__)
    def __init__(
        self,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
        default_value: V | None = None,
        strict: bool = False,
    ) -> None:
        """Initialise the grid.

        Args:
            width: number of rows
            height: number of columns
            default_value: the value every cell starts with
            strict: if True, raise GridDimensionError on malformed dimensions instead
                    of falling back to DEFAULT_SIZE

        """
        if not (_is_dimension(width) and _is_dimension(height)):
            if strict:
                raise GridDimensionError((width, height))
            _grid_logger.debug(
                f"malformed dimensions ({width!r}, {height!r}), "
                f"falling back to {DEFAULT_SIZE} where needed"
            )
        width = int(width) if _is_dimension(width) else DEFAULT_SIZE
        height = int(height) if _is_dimension(height) else DEFAULT_SIZE

        self.default_value = default_value
        self._width = width
        self._height = height
        self._cells = _allocate(width, height, default_value)
        _grid_logger.debug(f"created {width}x{height} grid")

    @classmethod
    def from_array(cls, array, default_value: V | None = None) -> Grid[V]:
        """Create a grid whose dimensions and contents come from a 2-D array.

        Args:
            array: anything numpy can turn into a two-dimensional array
            default_value: the default of the new grid

        Raises:
            GridDimensionError: if the array is not two-dimensional or has an empty axis
        """
        data = np.asarray(array, dtype=object)
        if data.ndim != 2 or 0 in data.shape:
            raise GridDimensionError(data.shape, "array must be two-dimensional and non-empty")

        grid = cls(data.shape[0], data.shape[1], default_value, strict=True)
        grid._cells[:, :] = data
        return grid

    @property
    def width(self) -> int:
        """Number of rows (extent of the x axis)."""
        return self._width

    @property
    def height(self) -> int:
        """Number of columns (extent of the y axis)."""
        return self._height

    @property
    def dimensions(self) -> tuple[int, int]:
        """``(width, height)`` of the grid."""
        return self._width, self._height

    # validation

    def is_valid(self, x, y) -> bool:
        """Check whether ``(x, y)`` addresses a cell of this grid.

        Never raises; non-integer input is simply not valid.
        """
        if not (_is_index(x) and _is_index(y)):
            return False
        return 0 <= x < self._width and 0 <= y < self._height

    # single cells

    def get_cell(self, x, y, default=None) -> V | Any:
        """Return the value of a cell, or ``default`` if ``(x, y)`` is not valid."""
        if self.is_valid(x, y):
            return self._cells[x, y]
        return default

    def set_cell(self, x, y, value: V) -> None:
        """Set a cell; invalid coordinates are ignored."""
        if self.is_valid(x, y):
            self._cells[x, y] = value

    def reset_cell(self, x, y) -> None:
        """Set a cell back to the default value; invalid coordinates are ignored."""
        if self.is_valid(x, y):
            self._cells[x, y] = self.default_value

    def reset_all(self) -> None:
        """Set every cell back to the default value."""
        self._cells.fill(self.default_value)

    def get_cells(self, coordinates) -> CellSequence[V]:
        """Return the values of several cells.

        Args:
            coordinates: iterable of ``(x, y)`` pairs

        Returns:
            the values of the valid coordinates, in the order given. Invalid or
            malformed pairs are skipped.
        """
        if not _is_batch(coordinates):
            return CellSequence(tuple, "get_cells")
        coordinates = tuple(coordinates)

        def cells():
            for pair in coordinates:
                try:
                    x, y = pair
                except (TypeError, ValueError):
                    continue
                if self.is_valid(x, y):
                    yield self._cells[x, y]

        return CellSequence(cells, "get_cells")

    def get_row(self, x) -> CellSequence[V]:
        """Return the values of row ``x``, left to right; empty if ``x`` is out of range."""
        x = _as_index(x)

        def row():
            if _is_index(x) and 0 <= x < self._width:
                yield from self._cells[x, :].tolist()

        return CellSequence(row, f"get_row({x!r})")

    def get_column(self, y) -> CellSequence[V]:
        """Return the values of column ``y``, top to bottom; empty if ``y`` is out of range."""
        y = _as_index(y)

        def column():
            if _is_index(y) and 0 <= y < self._height:
                yield from self._cells[:, y].tolist()

        return CellSequence(column, f"get_column({y!r})")

    # directions and neighbors

    @staticmethod
    def get_vector(direction) -> tuple[int, int] | None:
        """Return the ``(dx, dy)`` offset of a direction, or None if it is unknown."""
        return get_vector(direction)

    def get_neighbor(self, x, y, direction, default=None) -> V | Any:
        """Return the value of the neighbor of ``(x, y)`` in ``direction``.

        Returns ``default`` if the direction is unknown or the neighbor lies
        outside the grid.
        """
        vector = get_vector(direction)
        if vector is None or not (_is_index(x) and _is_index(y)):
            return default

        dx, dy = vector
        return self.get_cell(_as_index(x) + dx, _as_index(y) + dy, default)

    def get_neighbors(self, x, y) -> CellSequence[GridEntry]:
        """Return the eight neighbors of ``(x, y)``.

        The neighborhood is scanned row by row, from ``(x-1, y-1)`` to
        ``(x+1, y+1)``. Neighbors outside the grid are reported as
        ``GridEntry(None, None, OUTSIDE)``, so a valid origin always yields exactly
        eight entries. An invalid origin yields none.
        """
        x, y = _as_index(x), _as_index(y)

        def neighbors():
            if not self.is_valid(x, y):
                return
            for dx, dy in NEIGHBOR_OFFSETS:
                nx, ny = x + dx, y + dy
                if self.is_valid(nx, ny):
                    yield GridEntry(nx, ny, self._cells[nx, ny])
                else:
                    yield GridEntry(None, None, OUTSIDE)

        return CellSequence(neighbors, f"get_neighbors({x!r}, {y!r})")

    def traverse(self, x, y, direction) -> CellSequence[GridEntry]:
        """Walk a straight line from ``(x, y)`` in ``direction``.

        The walk starts one step past the origin and stops before the first
        position outside the grid; the origin itself is never included. The
        sequence is empty if the origin is invalid, the direction is unknown, or
        the direction is CENTER (which would never leave the grid).
        """
        label = f"traverse({x!r}, {y!r}, {direction!r})"
        vector = get_vector(direction)
        if vector is None or vector == (0, 0):
            return CellSequence(tuple, label)

        dx, dy = vector
        x, y = _as_index(x), _as_index(y)

        def walk():
            if not self.is_valid(x, y):
                return
            gx, gy = x + dx, y + dy
            while self.is_valid(gx, gy):
                yield GridEntry(gx, gy, self._cells[gx, gy])
                gx, gy = gx + dx, gy + dy

        return CellSequence(walk, label)

    # bulk transfer

    def get_contents(self, exclude_default: bool = False) -> CellSequence[GridEntry]:
        """Return every cell as ``(x, y, value)`` entries in row-major order.

        Args:
            exclude_default: if True, cells equal to the default value are left out

        The result can be fed to :meth:`populate` to recreate the layout.
        """

        def contents():
            for (x, y), value in np.ndenumerate(self._cells):
                if exclude_default and _same_value(value, self.default_value):
                    continue
                yield GridEntry(int(x), int(y), value)

        return CellSequence(contents, f"get_contents(exclude_default={exclude_default})")

    def populate(self, entries) -> None:
        """Set many cells at once.

        Args:
            entries: iterable of ``(x, y, value)`` triples. Entries with invalid
                     coordinates or of the wrong shape are skipped, and a value of
                     ``NIL_VALUE`` is replaced by the default value. Anything that
                     is not an iterable of entries is ignored.
        """
        if not _is_batch(entries):
            return

        written = 0
        for entry in entries:
            try:
                x, y, value = entry
            except (TypeError, ValueError):
                continue
            if not self.is_valid(x, y):
                continue
            x, y = operator.index(x), operator.index(y)
            if value is NIL_VALUE:
                value = self.default_value
            self._cells[x, y] = value
            written += 1
        _grid_logger.debug(f"populated {written} cells")

    def to_array(self) -> np.ndarray:
        """Return a copy of the cells as an object array of shape ``(width, height)``."""
        return self._cells.copy()

    # resizing

    @method_logger(__name__)
    def resize(self, new_width, new_height) -> bool:
        """Change the dimensions of the grid.

        Cells that fall outside the new bounds are dropped, and new cells start at
        the default value.

        Returns:
            True on success, False (leaving the grid untouched) if either dimension
            is not a positive integer.
        """
        if not (_is_dimension(new_width) and _is_dimension(new_height)):
            _grid_logger.debug(f"rejected resize to ({new_width!r}, {new_height!r})")
            return False

        contents = self.get_contents().to_list()

        old_dimensions = self.dimensions
        self._width = int(new_width)
        self._height = int(new_height)
        self._cells = _allocate(self._width, self._height, self.default_value)
        self.populate(contents)

        _grid_logger.debug(f"resized grid from {old_dimensions} to {self.dimensions}")
        return True

    # container protocol

    def _check_key(self, key) -> tuple[int, int]:
        try:
            x, y = key
        except (TypeError, ValueError):
            raise OutOfBoundsError(key, self.dimensions) from None
        if not self.is_valid(x, y):
            raise OutOfBoundsError(key, self.dimensions)
        return x, y

    def __getitem__(self, key: tuple[int, int]) -> V:  # noqa: D105
        return self._cells[self._check_key(key)]

    def __setitem__(self, key: tuple[int, int], value: V) -> None:  # noqa: D105
        self._cells[self._check_key(key)] = value

    def __contains__(self, key) -> bool:  # noqa: D105
        try:
            x, y = key
        except (TypeError, ValueError):
            return False
        return self.is_valid(x, y)

    def __iter__(self) -> Iterator[V]:  # noqa: D105
        return iter(self._cells.ravel().tolist())

    def __len__(self) -> int:  # noqa: D105
        return self._width * self._height

    def __repr__(self) -> str:  # noqa: D105
        return (
            f"{self.__class__.__name__}(width={self._width}, height={self._height}, "
            f"default_value={self.default_value!r})"
        )


def create(width, height, default_value=None) -> Grid:
    """Create a grid, falling back to DEFAULT_SIZE for malformed dimensions."""
    return Grid(width, height, default_value)
