from cli2048.fields.board import NUM_COLUMNS, NUM_ROWS, Grid, Snapshot
from cli2048.fields.actions import Direction, parse_direction
from cli2048.fields.moves import apply_move
from cli2048.fields.spawner import SpawnResult, spawn
from cli2048.fields.game import WIN_VALUE, Game, GameState, Message, Turn

__all__ = [
    "NUM_COLUMNS",
    "NUM_ROWS",
    "Grid",
    "Snapshot",
    "Direction",
    "parse_direction",
    "apply_move",
    "SpawnResult",
    "spawn",
    "WIN_VALUE",
    "Game",
    "GameState",
    "Message",
    "Turn",
]
