"""
terrace_grid.py — Terrace grid operations: creation, cell edits, resize.

Every operation returns a TerraceGrid and leaves its input untouched:
- create_grid: empty (all non-plantable) grid of a given size
- set_cell: single-cell edit; returns the same object when nothing changes
- clear_grid: every cell reset to non-plantable
- resize_grid: new dimensions, overlapping region copied, the rest empty

The grid also crosses the boundary to the recommendation service, so the
payload helpers live here too:
- grid_to_payload / grid_from_payload: {"rows", "cols", "grid"} row-major
- render_grid: one "T"/"F" string per row
"""

from models import TerraceGrid, InvalidDimension, OutOfBounds, check_dimension


def create_grid(rows, cols) -> TerraceGrid:
    """
    Create a rows x cols grid with every cell non-plantable.

    Raises:
        InvalidDimension: if rows or cols is not a positive integer.
    """
    check_dimension('rows', rows)
    check_dimension('cols', cols)
    return TerraceGrid(rows, cols, tuple((False,) * cols for _ in range(rows)))


def set_cell(grid: TerraceGrid, row, col, value) -> TerraceGrid:
    """
    Return a grid with cell (row, col) set to value.

    If the cell already holds value, the same grid object is returned so
    callers can detect "no change" with an identity check.

    Raises:
        OutOfBounds: if (row, col) is outside the grid. Coordinates are
            never clamped.
    """
    if not grid.in_bounds(row, col):
        raise OutOfBounds(
            f"cell ({row}, {col}) is outside a {grid.rows}x{grid.cols} grid"
        )
    value = bool(value)
    if grid.cells[row][col] == value:
        return grid

    current = grid.cells[row]
    new_row = current[:col] + (value,) + current[col + 1:]
    cells = grid.cells[:row] + (new_row,) + grid.cells[row + 1:]
    return TerraceGrid(grid.rows, grid.cols, cells)


def clear_grid(grid: TerraceGrid) -> TerraceGrid:
    """Return an all-empty grid with the same dimensions."""
    return create_grid(grid.rows, grid.cols)


def resize_grid(grid: TerraceGrid, new_rows, new_cols) -> TerraceGrid:
    """
    Resize a grid, keeping the cells both sizes have in common.

    Cells outside the overlap are non-plantable: shrinking drops painted
    tiles for good and growing adds empty tiles only.

    Args:
        grid: Source grid (not modified).
        new_rows: Target row count (> 0).
        new_cols: Target column count (> 0).

    Returns:
        A new new_rows x new_cols TerraceGrid.

    Raises:
        InvalidDimension: if new_rows or new_cols is not a positive integer.
    """
    check_dimension('rows', new_rows)
    check_dimension('cols', new_cols)

    keep_rows = min(grid.rows, new_rows)
    keep_cols = min(grid.cols, new_cols)
    pad = (False,) * (new_cols - keep_cols)

    cells = []
    for r in range(new_rows):
        if r < keep_rows:
            cells.append(grid.cells[r][:keep_cols] + pad)
        else:
            cells.append((False,) * new_cols)
    return TerraceGrid(new_rows, new_cols, tuple(cells))


# ========================================
# Payload helpers
# ========================================

def grid_to_payload(grid: TerraceGrid):
    """Serialize a grid as {"rows", "cols", "grid"} with nested lists."""
    return {
        'rows': grid.rows,
        'cols': grid.cols,
        'grid': [list(r) for r in grid.cells],
    }


def grid_from_payload(data) -> TerraceGrid:
    """
    Parse the payload produced by grid_to_payload.

    Raises:
        InvalidDimension: if rows/cols are missing or not positive.
        ValueError: if the matrix does not match rows/cols or holds
            non-boolean values.
    """
    if not isinstance(data, dict):
        raise ValueError("grid payload must be an object")
    rows = data.get('rows')
    cols = data.get('cols')
    check_dimension('rows', rows)
    check_dimension('cols', cols)

    matrix = data.get('grid')
    if not isinstance(matrix, list):
        raise ValueError("grid payload is missing the 'grid' matrix")
    cells = []
    for r in matrix:
        if not isinstance(r, list) or not all(isinstance(c, bool) for c in r):
            raise ValueError("grid rows must be lists of booleans")
        cells.append(tuple(r))
    return TerraceGrid(rows, cols, tuple(cells))


def render_grid(grid: TerraceGrid):
    """Return one 'T'/'F' string per row, T marking plantable tiles."""
    return [''.join('T' if c else 'F' for c in r) for r in grid.cells]
