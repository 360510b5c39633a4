"""
painting.py — Pointer/touch painting on a terrace grid.

A PaintingSession is a two-state machine:

    idle --start(cell)--> painting(tool) --move(cell)--> painting(tool)
                          painting(tool) --end()-------> idle

The tool (draw or erase) can only change while idle. Every write goes
through terrace_grid.set_cell, which returns the same grid when the cell
already holds the tool's value, so pointer-move events that stay inside
one tile cause no grid change and no redraw.
"""

import enum

from models import TerraceGrid
from terrace_grid import set_cell, clear_grid, resize_grid


class Tool(enum.Enum):
    DRAW = 'draw'
    ERASE = 'erase'


class PaintingStateError(RuntimeError):
    """Operation not allowed in the current painting state."""


class PaintingSession:
    """Interactive editor state for one terrace grid."""

    def __init__(self, grid: TerraceGrid, tool=Tool.DRAW):
        self.grid = grid
        self.tool = Tool(tool)
        self.painting = False
        # Bumped on every actual grid change
        self.version = 0

    @property
    def state(self):
        return 'painting' if self.painting else 'idle'

    def _write(self, row, col):
        new_grid = set_cell(self.grid, row, col, self.tool is Tool.DRAW)
        if new_grid is self.grid:
            return False
        self.grid = new_grid
        self.version += 1
        return True

    def start(self, row, col):
        """Begin a stroke at (row, col). Returns True if the grid changed."""
        changed = self._write(row, col)
        self.painting = True
        return changed

    def move(self, row, col):
        """
        Continue a stroke over (row, col).

        Ignored while idle. A row or col of None means the pointer is over
        the surface but not over a tile, so nothing is written.

        Returns:
            True if the grid changed.
        """
        if not self.painting or row is None or col is None:
            return False
        return self._write(row, col)

    def end(self):
        """Finish the current stroke (pointer released or left the surface)."""
        self.painting = False

    def set_tool(self, tool):
        """
        Switch between draw and erase.

        Raises:
            PaintingStateError: if a stroke is in progress.
            ValueError: if tool is not a known tool name.
        """
        tool = Tool(tool)
        if self.painting:
            raise PaintingStateError("cannot switch tools during a stroke")
        self.tool = tool

    def clear(self):
        """Reset every cell to non-plantable. Allowed in any state."""
        cleared = clear_grid(self.grid)
        if cleared.cells != self.grid.cells:
            self.version += 1
        self.grid = cleared

    def resize(self, new_rows, new_cols):
        """Replace the grid with a resized copy. Ends any open stroke."""
        self.painting = False
        resized = resize_grid(self.grid, new_rows, new_cols)
        if resized != self.grid:
            self.version += 1
        self.grid = resized

    def paint_stroke(self, cells):
        """
        Paint a whole stroke: start on the first cell, move over the rest.

        Args:
            cells: Iterable of (row, col) pairs.

        Returns:
            Number of cells whose value actually changed.
        """
        changed = 0
        for i, (row, col) in enumerate(cells):
            if i == 0:
                changed += self.start(row, col)
            else:
                changed += self.move(row, col)
        self.end()
        return changed

    def snapshot(self):
        return {
            'state': self.state,
            'tool': self.tool.value,
            'version': self.version,
        }
