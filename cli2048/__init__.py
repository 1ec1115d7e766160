"""cli2048 - the 2048 sliding-tile puzzle in the terminal."""

__version__ = "0.1.0"

from cli2048.fields import Direction, Game, GameState, Grid, Message

__all__ = [
    "Direction",
    "Game",
    "GameState",
    "Grid",
    "Message",
]
