"""4x4 grid storage for the 2048 board."""
from typing import Iterable, Optional

import numpy as np

NUM_ROWS = 4
NUM_COLUMNS = 4

# Immutable view of the board handed out to renderers and tests.
Snapshot = tuple[tuple[Optional[int], ...], ...]


def _is_tile_value(value: int) -> bool:
    return value >= 2 and value & (value - 1) == 0


class Grid:
    """Fixed-size board of optional tile values.

    Cells are stored in an integer array where 0 means empty.
    """

    def __init__(self):
        self.cells: np.ndarray = np.zeros((NUM_ROWS, NUM_COLUMNS), dtype=np.int64)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Optional[int]]]) -> "Grid":
        """Build a grid from nested rows, ``None`` marking empty cells."""
        grid = cls()
        rows = [list(row) for row in rows]
        if len(rows) != NUM_ROWS or any(len(row) != NUM_COLUMNS for row in rows):
            raise ValueError(f"Grid must be {NUM_ROWS}x{NUM_COLUMNS}")
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                grid.set(r, c, value)
        return grid

    @staticmethod
    def _check_position(row: int, col: int) -> None:
        if not (0 <= row < NUM_ROWS and 0 <= col < NUM_COLUMNS):
            raise IndexError(f"Cell ({row}, {col}) is outside the grid")

    def get(self, row: int, col: int) -> Optional[int]:
        """Return the tile at (row, col), or None if the cell is empty."""
        self._check_position(row, col)
        value = int(self.cells[row, col])
        return value or None

    def set(self, row: int, col: int, value: Optional[int]) -> None:
        """Store a tile at (row, col); ``None`` empties the cell."""
        self._check_position(row, col)
        if value is None:
            self.cells[row, col] = 0
            return
        if not _is_tile_value(value):
            raise ValueError(f"Invalid tile value: {value}")
        self.cells[row, col] = value

    def empty_cells(self) -> list[tuple[int, int]]:
        """Get empty cell coordinates in row-major order."""
        return [(int(r), int(c)) for r, c in zip(*np.where(self.cells == 0))]

    def is_full(self) -> bool:
        return not (self.cells == 0).any()

    def max_value(self) -> Optional[int]:
        """Return the largest tile on the board, or None when it is empty."""
        return int(self.cells.max()) or None

    def snapshot(self) -> Snapshot:
        return tuple(
            tuple(int(v) or None for v in row) for row in self.cells
        )

    def copy(self) -> "Grid":
        new_grid = Grid()
        new_grid.cells = self.cells.copy()
        return new_grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"Grid({[list(row) for row in self.snapshot()]})"
