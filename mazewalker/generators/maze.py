#!/usr/bin/env python3
#
#   maze.py
#
#   Read-only maze grid shared by the generator and the navigator.
#
#   Cell (row, col) is a unit square centered on the continuous point
#   (x, y) = (row, col).
#
from enum import IntEnum

import numpy as np
from shapely.geometry import Point, box
from shapely.ops import unary_union


class CellType(IntEnum):
    PATH = 0
    WALL = 1
    START = 2  # Where the agent spawns
    END = 3    # The exit


GLYPHS = {
    CellType.WALL: '#',
    CellType.PATH: ' ',
    CellType.START: 'S',
    CellType.END: 'D',
}

# Compact one-character-per-cell form accepted by Maze.from_rows.
ROW_CHARS = {'#': CellType.WALL, '.': CellType.PATH, ' ': CellType.PATH,
             'S': CellType.START, 'D': CellType.END}


class Maze:
    def __init__(self, grid, start, end):
        grid = np.array(grid, dtype=np.int8)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"maze grid must be square, got shape {grid.shape}")
        # Nobody gets a writable handle once the maze is built.
        grid.flags.writeable = False
        self.grid = grid
        self.size = grid.shape[0]
        self.start = tuple(int(v) for v in start)
        self.end = tuple(int(v) for v in end)
        if self.cell(*self.start) != CellType.START:
            raise ValueError(f"start {self.start} is not tagged START")
        if self.cell(*self.end) != CellType.END:
            raise ValueError(f"end {self.end} is not tagged END")

        self._wall_polys = None

    @classmethod
    def from_rows(cls, rows):
        """Build a maze from strings, one character per cell ('#', '.', 'S', 'D')."""
        grid = np.array([[ROW_CHARS[ch] for ch in row] for row in rows],
                        dtype=np.int8)
        starts = np.argwhere(grid == CellType.START)
        ends = np.argwhere(grid == CellType.END)
        if len(starts) != 1 or len(ends) != 1:
            raise ValueError(
                f"need exactly one S and one D, got {len(starts)} and {len(ends)}")
        return cls(grid, starts[0], ends[0])

    ############
    # Cell queries:
    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def cell(self, row, col):
        # numpy would silently wrap negative indices, so check explicitly.
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self.size}x{self.size} maze")
        return CellType(self.grid[row, col])

    def is_wall(self, row, col):
        return self.cell(row, col) == CellType.WALL

    def count(self, tag):
        return int(np.count_nonzero(self.grid == tag))

    def open_neighbors(self, row, col, step=1):
        neighbors = []
        for drow, dcol in ((-step, 0), (0, -step), (step, 0), (0, step)):
            r, c = row + drow, col + dcol
            if self.in_bounds(r, c) and self.grid[r, c] != CellType.WALL:
                neighbors.append((r, c))
        return neighbors

    ############
    # Wall geometry, built lazily since only plotting and clearance
    # readouts need it.
    @property
    def wall_polys(self):
        if self._wall_polys is None:
            polys = [box(i - 0.5, j - 0.5, i + 0.5, j + 0.5)
                     for i, j in np.argwhere(self.grid == CellType.WALL)]
            self._wall_polys = unary_union(polys)
        return self._wall_polys

    # Distance from a continuous point to the nearest wall square (0 inside).
    def clearance(self, x, y):
        return self.wall_polys.distance(Point(x, y))

    ############
    # Console map, one two-character glyph per cell.
    def to_text(self):
        lines = []
        for row in self.grid:
            lines.append(''.join(GLYPHS[CellType(v)] + ' ' for v in row).rstrip())
        return '\n'.join(lines)

    def __repr__(self):
        return "<Maze %dx%d start=%s end=%s>" % (self.size, self.size, self.start, self.end)
