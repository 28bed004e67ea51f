"""
Pixel grid - one on/off frame of the LED matrix.
NO UI DEPENDENCIES.
"""
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .constants import GRID_WIDTH, GRID_HEIGHT


class Direction(Enum):
    """Cursor directions."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    def delta(self) -> Tuple[int, int]:
        """Return (dx, dy) for this direction."""
        deltas = {
            Direction.UP: (0, -1),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }
        return deltas[self]


class PixelGrid:
    """
    A fixed 44x11 matrix of boolean cells.

    Coordinate system:
    - (0, 0) is top-left
    - x increases to the right (0..43)
    - y increases downward (0..10)

    Grids have value semantics: copy() is independent and == compares cells.
    """

    def __init__(self, cells: Optional[np.ndarray] = None):
        if cells is None:
            cells = np.zeros((GRID_HEIGHT, GRID_WIDTH), dtype=bool)
        else:
            cells = np.asarray(cells, dtype=bool)
            if cells.shape != (GRID_HEIGHT, GRID_WIDTH):
                raise ValueError(
                    f"Pixel grid must be {GRID_HEIGHT}x{GRID_WIDTH}, got {cells.shape}"
                )
            cells = cells.copy()
        self._cells = cells

    @staticmethod
    def in_bounds(x: int, y: int) -> bool:
        """Check if coordinates are within the matrix."""
        return 0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT

    def get(self, x: int, y: int) -> bool:
        """Cell value, or False if out of bounds."""
        if not self.in_bounds(x, y):
            return False
        return bool(self._cells[y, x])

    def set(self, x: int, y: int, value: bool) -> bool:
        """
        Set a cell.
        Returns False (and changes nothing) if out of bounds.
        """
        if not self.in_bounds(x, y):
            return False
        self._cells[y, x] = value
        return True

    def toggle(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        self._cells[y, x] = not self._cells[y, x]
        return True

    def invert(self):
        """Flip every cell."""
        np.logical_not(self._cells, out=self._cells)

    def clear(self):
        """Turn every cell off."""
        self._cells[:] = False

    def count_on(self) -> int:
        return int(self._cells.sum())

    def rows(self) -> Iterator[List[bool]]:
        """Iterate rows top to bottom as lists of bools."""
        for row in self._cells:
            yield [bool(v) for v in row]

    def to_array(self) -> np.ndarray:
        """Independent (11, 44) bool array of the cells."""
        return self._cells.copy()

    def copy(self) -> 'PixelGrid':
        return PixelGrid(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"PixelGrid(on={self.count_on()})"
