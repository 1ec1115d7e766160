"""Move engine: compact, merge and compact again along one direction."""
import numpy as np

from cli2048.fields.actions import Direction
from cli2048.fields.board import NUM_COLUMNS, NUM_ROWS, Grid


def compact_line(line: np.ndarray) -> None:
    """Slide the tiles of ``line`` toward index 0, keeping their order."""
    tiles = line[line != 0]
    line[:] = 0
    line[: len(tiles)] = tiles


def merge_line(line: np.ndarray) -> None:
    """Merge equal neighbours of ``line`` toward index 0.

    Pairs are visited once, from index 0 outward. The edge-ward cell doubles
    and the far cell empties, so the next pair starts on an empty cell and a
    merged tile never merges again in the same pass.
    """
    for i in range(len(line) - 1):
        if line[i] != 0 and line[i] == line[i + 1]:
            line[i] *= 2
            line[i + 1] = 0


def _lines(cells: np.ndarray, direction: Direction) -> list[np.ndarray]:
    """Views of every line, each ordered from the moving edge outward."""
    if direction == Direction.LEFT:
        return [cells[r, :] for r in range(NUM_ROWS)]
    if direction == Direction.RIGHT:
        return [cells[r, ::-1] for r in range(NUM_ROWS)]
    if direction == Direction.UP:
        return [cells[:, c] for c in range(NUM_COLUMNS)]
    if direction == Direction.DOWN:
        return [cells[::-1, c] for c in range(NUM_COLUMNS)]
    raise ValueError(f"Invalid direction: {direction}")


def apply_move(grid: Grid, direction: Direction) -> bool:
    """
    Move every tile of ``grid`` in place.

    Args:
        grid: The board to mutate
        direction: Edge the tiles slide toward

    Returns:
        Whether any cell changed
    """
    before = grid.cells.copy()
    for line in _lines(grid.cells, direction):
        compact_line(line)
        merge_line(line)
        compact_line(line)
    return not np.array_equal(before, grid.cells)
