from enum import Enum
from typing import Optional


class Direction(Enum):
    """Directions a move can slide the tiles in."""
    UP = "up"
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"


KEY_BINDINGS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}

_LINE_ENDINGS = ("\r\n", "\n", "\r")


def parse_direction(raw: str) -> Optional[Direction]:
    """Parse one line of player input to a direction.

    Exactly one trailing line ending is stripped and the rest is case-folded;
    anything other than a single w/a/s/d key yields None.
    """
    for ending in _LINE_ENDINGS:
        if raw.endswith(ending):
            raw = raw[: -len(ending)]
            break
    return KEY_BINDINGS.get(raw.casefold())
