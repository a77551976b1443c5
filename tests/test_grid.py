"""Tests for construction, bounds validation and cell access of Grid."""

import numpy as np
import pytest

from cellgrid import (
    DEFAULT_SIZE,
    NOT_VALID,
    Grid,
    GridDimensionError,
    OutOfBoundsError,
    create,
)


class TestGridConstruction:
    """Tests for creating grids."""

    def test_create_sets_dimensions_and_default(self):
        """Test create() builds a grid filled with the default value."""
        grid = create(8, 6, " ")
        assert grid.width == 8
        assert grid.height == 6
        assert grid.dimensions == (8, 6)
        assert grid.default_value == " "
        assert len(grid) == 48
        assert all(value == " " for value in grid)

    def test_default_arguments(self):
        """Test Grid() without arguments is a 4x4 grid of None."""
        grid = Grid()
        assert grid.dimensions == (DEFAULT_SIZE, DEFAULT_SIZE)
        assert grid.get_cell(0, 0) is None

    @pytest.mark.parametrize(
        "width, height, expected",
        [
            ("8", 8, (4, 8)),
            (8, None, (8, 4)),
            (2.5, 3, (4, 3)),
            (True, 5, (4, 5)),
            (0, -3, (4, 4)),
        ],
    )
    def test_malformed_dimensions_fall_back(self, width, height, expected):
        """Test malformed dimensions are replaced by the fallback size."""
        grid = create(width, height, 0)
        assert grid.dimensions == expected
        assert len(grid) == expected[0] * expected[1]

    def test_numpy_integer_dimensions(self):
        """Test numpy integers are accepted as dimensions."""
        grid = Grid(np.int64(3), np.int32(2))
        assert grid.dimensions == (3, 2)
        assert isinstance(grid.width, int)

    def test_strict_construction_raises(self):
        """Test strict mode rejects malformed dimensions."""
        with pytest.raises(GridDimensionError, match="Invalid grid dimensions"):
            Grid("a", 4, strict=True)
        with pytest.raises(GridDimensionError):
            Grid(4, 0, strict=True)

    def test_mutable_default_is_stored_as_single_object(self):
        """Test a sequence default is stored per cell rather than broadcast."""
        grid = Grid(2, 2, [1, 2])
        assert grid.get_cell(1, 1) == [1, 2]

    def test_repr(self):
        """Test repr shows dimensions and default."""
        assert repr(Grid(2, 3, "x")) == "Grid(width=2, height=3, default_value='x')"


class TestBoundsValidation:
    """Tests for Grid.is_valid."""

    def test_valid_coordinates(self):
        """Test every coordinate inside the bounds is valid."""
        grid = Grid(3, 5)
        for x in range(3):
            for y in range(5):
                assert grid.is_valid(x, y)

    @pytest.mark.parametrize(
        "x, y",
        [(-1, 0), (0, -1), (3, 0), (0, 5), (3, 5), (100, 100)],
    )
    def test_out_of_range(self, x, y):
        """Test coordinates outside the bounds are not valid."""
        assert not Grid(3, 5).is_valid(x, y)

    @pytest.mark.parametrize(
        "x, y",
        [("0", 0), (0, None), (1.0, 1), (None, None), (True, 0), ([0], 0)],
    )
    def test_malformed_coordinates(self, x, y):
        """Test non-integer coordinates are not valid and do not raise."""
        assert not Grid(3, 5).is_valid(x, y)

    def test_numpy_integer_coordinates(self):
        """Test numpy integers are valid coordinates."""
        assert Grid(3, 5).is_valid(np.int64(2), np.int8(4))

    def test_width_is_vertical_axis(self):
        """Test x is bounded by width and y by height."""
        grid = Grid(2, 6)
        assert grid.is_valid(1, 5)
        assert not grid.is_valid(5, 1)


class TestCellStore:
    """Tests for reading and writing single cells."""

    def test_set_then_get(self):
        """Test a value set in a valid cell is read back."""
        grid = create(8, 8, " ")
        grid.set_cell(2, 7, "X")
        assert grid.get_cell(2, 7) == "X"
        assert grid.get_cell(7, 2) == " "

    @pytest.mark.parametrize("value", [0, "", None, 1.5, (1, 2), {"hp": 3}])
    def test_arbitrary_payloads(self, value):
        """Test cells store any object unchanged."""
        grid = create(3, 3, "default")
        grid.set_cell(1, 1, value)
        assert grid.get_cell(1, 1) == value

    def test_get_invalid_returns_none(self):
        """Test reading an invalid cell signals absence."""
        grid = create(3, 3, 0)
        assert grid.get_cell(3, 0) is None
        assert grid.get_cell("a", 0) is None

    def test_get_invalid_with_default(self):
        """Test a caller supplied default distinguishes misses from None payloads."""
        grid = create(3, 3, None)
        assert grid.get_cell(0, 0, NOT_VALID) is None
        assert grid.get_cell(-1, 0, NOT_VALID) is NOT_VALID

    def test_set_invalid_is_noop(self):
        """Test writing an invalid cell leaves the grid unchanged."""
        grid = create(3, 3, 0)
        before = grid.to_array()
        grid.set_cell(3, 3, 9)
        grid.set_cell(-1, 0, 9)
        grid.set_cell("1", 1, 9)
        assert np.array_equal(grid.to_array(), before)

    def test_reset_cell(self):
        """Test reset_cell restores the default value."""
        grid = create(3, 3, ".")
        grid.set_cell(1, 2, "#")
        grid.reset_cell(1, 2)
        assert grid.get_cell(1, 2) == "."

    def test_reset_cell_invalid_is_noop(self):
        """Test reset_cell ignores invalid coordinates."""
        grid = create(3, 3, ".")
        grid.set_cell(2, 2, "#")
        grid.reset_cell(3, 3)
        assert grid.get_cell(2, 2) == "#"

    def test_reset_all(self):
        """Test reset_all restores every cell."""
        grid = create(4, 4, 0)
        for x in range(4):
            grid.set_cell(x, x, x + 1)
        grid.reset_all()
        assert list(grid) == [0] * 16

    def test_get_cells_filters_invalid(self):
        """Test get_cells skips invalid pairs and keeps the order of valid ones."""
        grid = create(3, 3, 0)
        grid.set_cell(0, 0, "a")
        grid.set_cell(2, 1, "b")
        grid.set_cell(1, 2, "c")
        cells = grid.get_cells([(1, 2), (5, 5), (0, 0), ("x", 1), (2, 1)])
        assert list(cells) == ["c", "a", "b"]

    def test_get_cells_skips_malformed_pairs(self):
        """Test get_cells tolerates entries that are not pairs."""
        grid = create(3, 3, 0)
        assert list(grid.get_cells([(0, 0), 7, (1,), (1, 1, 1), None])) == [0]

    @pytest.mark.parametrize("coordinates", [None, 5, "00", {(0, 0): 1}])
    def test_get_cells_non_sequence(self, coordinates):
        """Test get_cells returns an empty sequence for non-sequence input."""
        assert list(create(3, 3, 0).get_cells(coordinates)) == []

    def test_get_row_and_column(self):
        """Test rows run along y and columns along x."""
        grid = create(2, 3, 0)
        grid.populate([(0, 0, "a"), (0, 1, "b"), (0, 2, "c"), (1, 1, "d")])
        assert list(grid.get_row(0)) == ["a", "b", "c"]
        assert list(grid.get_row(1)) == [0, "d", 0]
        assert list(grid.get_column(1)) == ["b", "d"]

    @pytest.mark.parametrize("index", [-1, 3, "0", None])
    def test_get_row_and_column_invalid(self, index):
        """Test invalid row or column indices give empty sequences."""
        grid = create(3, 3, 0)
        assert list(grid.get_row(index)) == []
        assert list(grid.get_column(index)) == []


class TestSubscriptAccess:
    """Tests for the strict container protocol."""

    def test_getitem_and_setitem(self):
        """Test subscripting reads and writes cells."""
        grid = create(3, 3, 0)
        grid[1, 2] = "z"
        assert grid[1, 2] == "z"
        assert grid.get_cell(1, 2) == "z"

    def test_getitem_out_of_bounds_raises(self):
        """Test subscripting an invalid coordinate raises OutOfBoundsError."""
        grid = create(3, 3, 0)
        with pytest.raises(OutOfBoundsError, match="out of bounds"):
            grid[3, 0]
        with pytest.raises(IndexError):
            grid[0, -1]

    def test_setitem_malformed_key_raises(self):
        """Test subscripting with a malformed key raises OutOfBoundsError."""
        grid = create(3, 3, 0)
        with pytest.raises(OutOfBoundsError):
            grid[0] = 1

    def test_contains(self):
        """Test membership reflects coordinate validity."""
        grid = create(3, 3, 0)
        assert (2, 2) in grid
        assert (3, 2) not in grid
        assert "ab" not in grid
        assert 5 not in grid

    def test_iteration_is_row_major(self):
        """Test iterating a grid yields values row by row."""
        grid = create(2, 2, 0)
        grid.populate([(0, 1, 1), (1, 0, 2), (1, 1, 3)])
        assert list(grid) == [0, 1, 2, 3]
