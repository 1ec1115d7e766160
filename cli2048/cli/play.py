#!/usr/bin/env python3
"""Interactive 2048 game - play with keyboard (w/a/s/d)."""
import logging
import sys
from typing import Optional

from cli2048.display import render
from cli2048.errors import InputClosedError
from cli2048.fields import Game, GameState
from cli2048.utils import setup_logging

logger = logging.getLogger(__name__)


def read_line() -> str:
    """Block until the player enters a line."""
    try:
        return input()
    except EOFError as e:
        raise InputClosedError("Input stream closed") from e
    except (OSError, UnicodeDecodeError) as e:
        raise InputClosedError(f"Cannot read input: {e}") from e


def run(game: Optional[Game] = None) -> GameState:
    """Play one game to the end and return its terminal state."""
    print("Welcome to 2048 CLI!")
    print("To move print w, a, s or d")
    read_line()

    game = game or Game()
    turn = game.start()
    render(turn.grid, turn.message)

    while not game.is_over:
        turn = game.play_turn(read_line())
        render(turn.grid, turn.message)

    render(game.snapshot(), game.final_message())
    try:
        read_line()
    except InputClosedError as e:
        # The game is already over, nothing is left to wait for.
        logger.debug("Final pause skipped: %s", e)
    return game.state


def main():
    """Run interactive 2048 game."""
    setup_logging()
    try:
        state = run()
    except InputClosedError as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nQuit.")
        sys.exit(130)
    logger.info("Game finished with %s", state.name)


if __name__ == "__main__":
    main()
