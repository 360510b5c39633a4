"""
tests/test_terrace_grid.py — Tests for grid creation, cell edits and resize.

Tests cover:
- create_grid shape and dimension errors
- set_cell bounds checking and same-object return on no-op
- resize_grid overlap copy, growth, shrink and round trips
- Payload serialization for the recommendation service
"""

import pytest

from models import TerraceGrid, InvalidDimension, OutOfBounds
from terrace_grid import (
    create_grid, set_cell, clear_grid, resize_grid,
    grid_to_payload, grid_from_payload, render_grid
)


def _paint(grid, cells):
    for r, c in cells:
        grid = set_cell(grid, r, c, True)
    return grid


# ========================================
# create_grid
# ========================================

class TestCreateGrid:

    @pytest.mark.parametrize("rows,cols", [(1, 1), (3, 7), (15, 15), (25, 5)])
    def test_shape_and_all_false(self, rows, cols):
        grid = create_grid(rows, cols)
        assert grid.rows == rows
        assert grid.cols == cols
        assert len(grid.cells) == rows
        assert all(len(r) == cols for r in grid.cells)
        assert not any(any(r) for r in grid.cells)
        assert grid.plantable_count == 0

    @pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 3), (3, -2)])
    def test_non_positive_dimensions(self, rows, cols):
        with pytest.raises(InvalidDimension):
            create_grid(rows, cols)

    def test_non_integer_dimensions(self):
        with pytest.raises(InvalidDimension):
            create_grid(2.5, 3)
        with pytest.raises(InvalidDimension):
            create_grid(True, 3)

    def test_invalid_dimension_is_value_error(self):
        with pytest.raises(ValueError):
            create_grid(0, 0)

    def test_mismatched_cells_rejected(self):
        with pytest.raises(ValueError):
            TerraceGrid(2, 2, ((False, False),))
        with pytest.raises(ValueError):
            TerraceGrid(2, 2, ((False, False), (False,)))


# ========================================
# set_cell
# ========================================

class TestSetCell:

    def test_sets_only_that_cell(self):
        grid = create_grid(3, 4)
        new_grid = set_cell(grid, 1, 2, True)
        assert new_grid.cells[1][2] is True
        assert new_grid.plantable_count == 1
        # Original untouched
        assert grid.plantable_count == 0

    def test_same_value_returns_same_object(self):
        grid = create_grid(3, 3)
        assert set_cell(grid, 0, 0, False) is grid
        painted = set_cell(grid, 0, 0, True)
        assert set_cell(painted, 0, 0, True) is painted

    def test_idempotent(self):
        grid = create_grid(4, 4)
        once = set_cell(grid, 2, 3, True)
        twice = set_cell(set_cell(grid, 2, 3, True), 2, 3, True)
        assert once == twice

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3), (10, 10)])
    def test_out_of_bounds(self, row, col):
        grid = create_grid(3, 3)
        with pytest.raises(OutOfBounds):
            set_cell(grid, row, col, True)

    def test_out_of_bounds_is_index_error(self):
        with pytest.raises(IndexError):
            set_cell(create_grid(2, 2), 2, 2, True)

    @pytest.mark.parametrize("row,col", [(1.5, 0), (0, 0.5), (1.0, 1), ('1', 0), (None, 0)])
    def test_non_integer_coordinates_out_of_bounds(self, row, col):
        grid = create_grid(3, 3)
        assert not grid.in_bounds(row, col)
        with pytest.raises(OutOfBounds):
            set_cell(grid, row, col, True)

    def test_clear_grid(self):
        grid = _paint(create_grid(3, 3), [(0, 0), (1, 1), (2, 2)])
        cleared = clear_grid(grid)
        assert (cleared.rows, cleared.cols) == (3, 3)
        assert cleared.plantable_count == 0


# ========================================
# resize_grid
# ========================================

class TestResizeGrid:

    def test_same_dimensions_is_identity(self):
        grid = _paint(create_grid(4, 5), [(0, 0), (3, 4), (2, 1)])
        assert resize_grid(grid, 4, 5) == grid

    def test_grow_keeps_cells_and_adds_empty(self):
        grid = _paint(create_grid(2, 2), [(0, 0), (1, 1)])
        bigger = resize_grid(grid, 4, 3)
        assert (bigger.rows, bigger.cols) == (4, 3)
        assert bigger.cells[0][0] and bigger.cells[1][1]
        assert bigger.plantable_count == 2
        assert not any(bigger.cells[3])
        assert not bigger.cells[0][2]

    def test_shrink_discards_outside(self):
        grid = _paint(create_grid(4, 4), [(0, 0), (3, 3), (1, 3)])
        smaller = resize_grid(grid, 2, 2)
        assert smaller.plantable_count == 1
        assert smaller.cells[0][0]

    def test_round_trip_keeps_overlap_only(self):
        painted = [(0, 0), (1, 2), (2, 1), (4, 4), (0, 4)]
        grid = _paint(create_grid(5, 5), painted)
        back = resize_grid(resize_grid(grid, 3, 3), 5, 5)
        for r in range(5):
            for c in range(5):
                if r < 3 and c < 3:
                    assert back.cells[r][c] == grid.cells[r][c]
                else:
                    assert back.cells[r][c] is False

    def test_mixed_grow_and_shrink(self):
        grid = _paint(create_grid(3, 5), [(2, 4), (2, 0)])
        resized = resize_grid(grid, 6, 2)
        assert (resized.rows, resized.cols) == (6, 2)
        assert resized.cells[2][0]
        assert resized.plantable_count == 1

    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-4, 4)])
    def test_invalid_dimension(self, rows, cols):
        with pytest.raises(InvalidDimension):
            resize_grid(create_grid(3, 3), rows, cols)

    def test_input_not_modified(self):
        grid = _paint(create_grid(3, 3), [(2, 2)])
        resize_grid(grid, 1, 1)
        assert grid.cells[2][2]


# ========================================
# Payloads
# ========================================

class TestPayload:

    def test_payload_shape(self):
        grid = _paint(create_grid(2, 3), [(0, 1), (1, 2)])
        payload = grid_to_payload(grid)
        assert payload == {
            'rows': 2,
            'cols': 3,
            'grid': [[False, True, False], [False, False, True]],
        }

    def test_payload_parses_back(self):
        grid = _paint(create_grid(3, 2), [(2, 1)])
        assert grid_from_payload(grid_to_payload(grid)) == grid

    def test_payload_shape_mismatch(self):
        with pytest.raises(ValueError):
            grid_from_payload({'rows': 2, 'cols': 2, 'grid': [[True, False]]})

    def test_payload_bad_dimension(self):
        with pytest.raises(InvalidDimension):
            grid_from_payload({'rows': 0, 'cols': 2, 'grid': []})

    def test_payload_non_boolean_cells(self):
        with pytest.raises(ValueError):
            grid_from_payload({'rows': 1, 'cols': 2, 'grid': [[1, 0]]})

    def test_render_grid(self):
        grid = _paint(create_grid(2, 3), [(0, 0), (1, 2)])
        assert render_grid(grid) == ['TFF', 'FFT']
