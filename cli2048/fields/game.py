"""2048 game logic."""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from cli2048.errors import GameFinishedError
from cli2048.fields.actions import Direction, parse_direction
from cli2048.fields.board import Grid, Snapshot
from cli2048.fields.moves import apply_move
from cli2048.fields.spawner import SpawnResult, spawn

logger = logging.getLogger(__name__)

WIN_VALUE = 2048


class GameState(Enum):
    IN_GAME = auto()
    WIN = auto()
    LOSE = auto()


class Message(Enum):
    """Status lines shown under the board."""
    INCORRECT_MOVE = "This move is incorrect"
    WIN = "Congratulations! You won!"
    LOSE = "Looser!"


@dataclass(frozen=True)
class Turn:
    """Render payload produced by one turn."""
    grid: Snapshot
    message: Optional[Message] = None
    direction: Optional[Direction] = None
    moved: bool = False


class Game:
    """2048 game implementation."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.grid = Grid()
        self.state = GameState.IN_GAME
        self._rng = rng

    @property
    def is_over(self) -> bool:
        return self.state != GameState.IN_GAME

    def snapshot(self) -> Snapshot:
        return self.grid.snapshot()

    def start(self) -> Turn:
        """Spawn the opening tile and return the first render payload."""
        spawn(self.grid, self._rng)
        return Turn(grid=self.snapshot())

    def play_turn(self, raw_input: str) -> Turn:
        """
        Play one turn from a raw line of player input.

        Args:
            raw_input: The line typed by the player (w/a/s/d)

        Returns:
            The board snapshot and the message to show with it

        Raises:
            GameFinishedError: If the game already ended
        """
        if self.is_over:
            raise GameFinishedError(f"Game already ended with {self.state.name}")

        direction = parse_direction(raw_input)
        if direction is None:
            logger.debug("Rejected input %r", raw_input)
            return Turn(grid=self.snapshot(), message=Message.INCORRECT_MOVE)

        moved = apply_move(self.grid, direction)
        logger.debug("Moved %s, board changed: %s", direction.name, moved)

        # A valid direction always tries to spawn, even when nothing moved.
        lost = spawn(self.grid, self._rng) == SpawnResult.GRID_FULL
        max_value = self.grid.max_value()
        won = max_value is not None and max_value >= WIN_VALUE

        # Reaching the win tile takes precedence over a full board.
        if won:
            self._transition(GameState.WIN)
        elif lost:
            self._transition(GameState.LOSE)

        return Turn(
            grid=self.snapshot(),
            message=self.final_message(),
            direction=direction,
            moved=moved,
        )

    def final_message(self) -> Optional[Message]:
        """Return the message for a terminal state, or None while playing."""
        if self.state == GameState.WIN:
            return Message.WIN
        if self.state == GameState.LOSE:
            return Message.LOSE
        return None

    def _transition(self, state: GameState) -> None:
        logger.info("Game state %s -> %s", self.state.name, state.name)
        self.state = state
