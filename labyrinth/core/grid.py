from array import array
from enum import IntEnum
from typing import Iterator, NamedTuple, Optional, Tuple

import numpy as np


class Side(IntEnum):
    TOP = 1
    LEFT = 2
    RIGHT = 3
    BOTTOM = 4


class Mark(IntEnum):
    """Solver state of a cell. 1..4 mean "probing that Side"."""
    UNVISITED = 0
    PROBE_TOP = 1
    PROBE_LEFT = 2
    PROBE_RIGHT = 3
    PROBE_BOTTOM = 4
    DEAD_END = 5
    ON_PATH = 6

    @classmethod
    def probing(cls, side: Side) -> "Mark":
        return cls(int(side))

    @property
    def is_probing(self) -> bool:
        return 1 <= self <= 4


class Cell(NamedTuple):
    top_wall: bool
    left_wall: bool
    visited: bool
    mark: Mark


class Grid:
    # Bitmask Constants
    TOP_WALL  = 0b00000001
    LEFT_WALL = 0b00000010

    # Flags
    VISITED   = 0b00000100

    # Only top and left walls are stored, right/bottom belong to the neighbor
    ALL_WALLS = TOP_WALL | LEFT_WALL

    # Direction Helpers
    DROW = {Side.TOP: -1, Side.LEFT: 0, Side.RIGHT: 0, Side.BOTTOM: 1}
    DCOL = {Side.TOP: 0, Side.LEFT: -1, Side.RIGHT: 1, Side.BOTTOM: 0}

    __slots__ = ('rows', 'cols', 'cells', 'marks', 'col_start', 'col_end')

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid needs at least one row and column, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        # One extra row and column of sentinels closing the bottom/right border.
        # 'B' (unsigned char) -> 1 byte per cell
        size = (rows + 1) * (cols + 1)
        self.cells = array('B', [self.ALL_WALLS] * size)
        self.marks = array('B', [Mark.UNVISITED] * size)

        # Entry column on row 1 and exit column on the last row, set by the generator
        self.col_start: Optional[int] = None
        self.col_end: Optional[int] = None

    def get_index(self, row: int, col: int) -> int:
        if 1 <= row <= self.rows + 1 and 1 <= col <= self.cols + 1:
            return (row - 1) * (self.cols + 1) + (col - 1)
        raise IndexError(f"Cell ({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")

    def in_bounds(self, row: int, col: int) -> bool:
        """True for interior cells, i.e. not a sentinel and not outside."""
        return 1 <= row <= self.rows and 1 <= col <= self.cols

    def neighbor(self, row: int, col: int, side: Side) -> Tuple[int, int]:
        return row + self.DROW[side], col + self.DCOL[side]

    def _owner(self, row: int, col: int, side: Side) -> Tuple[int, int]:
        """
        Returns (index, bit) of the stored flag holding the wall on 'side'.
        RIGHT is the LEFT wall of the next column, BOTTOM the TOP wall of the next row.
        """
        if side == Side.TOP:
            return self.get_index(row, col), self.TOP_WALL
        if side == Side.LEFT:
            return self.get_index(row, col), self.LEFT_WALL
        if side == Side.RIGHT:
            return self.get_index(row, col + 1), self.LEFT_WALL
        if side == Side.BOTTOM:
            return self.get_index(row + 1, col), self.TOP_WALL
        raise ValueError(f"Unknown side {side!r}")

    def clear_wall(self, row: int, col: int, side: Side):
        if not self.in_bounds(row, col):
            raise IndexError(f"Cannot carve sentinel or outside cell ({row}, {col})")
        idx, bit = self._owner(row, col, side)
        self.cells[idx] &= ~bit

    def get_wall(self, row: int, col: int, side: Side) -> bool:
        self.get_index(row, col)
        idx, bit = self._owner(row, col, side)
        return (self.cells[idx] & bit) != 0

    def get_top_wall(self, row: int, col: int) -> bool:
        return self.get_wall(row, col, Side.TOP)

    def get_left_wall(self, row: int, col: int) -> bool:
        self.get_index(row, col)
        if col == self.cols + 1:
            return True
        return self.get_wall(row, col, Side.LEFT)

    def set_visited(self, row: int, col: int, visited: bool = True):
        idx = self.get_index(row, col)
        if visited:
            self.cells[idx] |= self.VISITED
        else:
            self.cells[idx] &= ~self.VISITED

    def is_visited(self, row: int, col: int) -> bool:
        return (self.cells[self.get_index(row, col)] & self.VISITED) != 0

    def get_mark(self, row: int, col: int) -> Mark:
        return Mark(self.marks[self.get_index(row, col)])

    def set_mark(self, row: int, col: int, mark: Mark):
        self.marks[self.get_index(row, col)] = mark

    def cell(self, row: int, col: int) -> Cell:
        idx = self.get_index(row, col)
        val = self.cells[idx]
        return Cell(
            top_wall=(val & self.TOP_WALL) != 0,
            left_wall=(val & self.LEFT_WALL) != 0,
            visited=(val & self.VISITED) != 0,
            mark=Mark(self.marks[idx]),
        )

    def interior(self) -> Iterator[Tuple[int, int]]:
        """Yields (row, col) of every non-sentinel cell, row by row."""
        for row in range(1, self.rows + 1):
            for col in range(1, self.cols + 1):
                yield row, col

    def get_open_neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int, Side]]:
        """
        Yields (nrow, ncol, side) for interior neighbors NOT blocked by a wall.
        Entry/exit openings lead outside and are not reported.
        """
        for side in Side:
            nrow, ncol = self.neighbor(row, col, side)
            if self.in_bounds(nrow, ncol) and not self.get_wall(row, col, side):
                yield nrow, ncol, side

    def wall_bitmap(self) -> np.ndarray:
        """(rows+1, cols+1) array of TOP_WALL|LEFT_WALL bits, sentinels included."""
        raw = np.frombuffer(self.cells.tobytes(), dtype=np.uint8)
        return raw.reshape(self.rows + 1, self.cols + 1) & self.ALL_WALLS
