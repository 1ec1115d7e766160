"""Text rendering of the board."""
import os
import sys
from typing import Optional, TextIO

from cli2048.fields import Message, Snapshot

EMPTY_CELL = "-"


def _format_cell(value: Optional[int], half: int) -> str:
    if value is None:
        return " " * half + EMPTY_CELL + " " * half
    text = str(value)
    pad = half - len(text) // 2
    if len(text) % 2 == 0:
        text += " "
    return " " * pad + text + " " * pad


def format_grid(grid: Snapshot) -> str:
    """Render the board with every cell centred in a fixed-width column.

    The column width follows the widest value currently on the board.
    """
    max_len = max(
        [len(str(value)) for row in grid for value in row if value is not None],
        default=1,
    )
    half = max_len // 2 + 1
    return "".join(
        "".join(_format_cell(value, half) for value in row) + "\n" for row in grid
    )


def format_screen(grid: Snapshot, message: Optional[Message] = None) -> str:
    """Board followed by the status line, if any."""
    screen = format_grid(grid)
    if message is not None:
        screen += f"\n{message.value}\n"
    return screen


def clear_screen(stream: Optional[TextIO] = None) -> None:
    """Clear terminal screen."""
    if os.name == "nt":
        os.system("cls")
    else:
        (stream or sys.stdout).write("\033[2J\033[H")


def render(
    grid: Snapshot,
    message: Optional[Message] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Clear the screen and draw the board with its status line."""
    stream = stream or sys.stdout
    clear_screen(stream)
    stream.write(format_screen(grid, message))
    stream.flush()
