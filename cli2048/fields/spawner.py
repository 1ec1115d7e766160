"""Random tile spawning."""
import logging
import random
from enum import Enum, auto

from cli2048.fields.board import Grid

logger = logging.getLogger(__name__)

# Fractions above this spawn a 4 instead of a 2.
SPAWN_FOUR_THRESHOLD = 0.9


class SpawnResult(Enum):
    SPAWNED = auto()
    GRID_FULL = auto()


def spawn(grid: Grid, rng: random.Random | None = None) -> SpawnResult:
    """Place a 2 (90% prob) or a 4 (10% prob) on a random empty cell."""
    rng = rng or random
    empty_cells = grid.empty_cells()
    if not empty_cells:
        logger.debug("No empty cell left to spawn into")
        return SpawnResult.GRID_FULL
    row, col = rng.choice(empty_cells)
    value = 4 if rng.random() > SPAWN_FOUR_THRESHOLD else 2
    grid.set(row, col, value)
    logger.debug("Spawned %d at (%d, %d)", value, row, col)
    return SpawnResult.SPAWNED
