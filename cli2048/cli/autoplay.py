#!/usr/bin/env python3
"""Automatic 2048 play with random directions."""
import argparse
import logging
import random
import time

from tqdm import tqdm

from cli2048.display import render
from cli2048.fields import Direction, Game, GameState
from cli2048.fields.actions import KEY_BINDINGS
from cli2048.utils import setup_logging

logger = logging.getLogger(__name__)

DIRECTION_KEYS = {direction: key for key, direction in KEY_BINDINGS.items()}


def random_policy(rng: random.Random) -> Direction:
    """Select a random direction."""
    return rng.choice(list(Direction))


def play_game(
    rng: random.Random,
    max_steps: int,
    delay_sec: float = 0.0,
    show: bool = False,
) -> dict:
    """Play one game with the random policy and return its summary."""
    game = Game(rng=rng)
    turn = game.start()
    steps = 0

    while not game.is_over and steps < max_steps:
        direction = random_policy(rng)
        turn = game.play_turn(DIRECTION_KEYS[direction])
        steps += 1

        if show:
            render(turn.grid, turn.message)
            print(f"Step: {steps}, Direction: {direction.name}")
            time.sleep(delay_sec)

    return {
        "state": game.state,
        "max_tile": game.grid.max_value() or 0,
        "steps": steps,
    }


def main():
    """Run automatic 2048 games."""
    parser = argparse.ArgumentParser(description="Auto-play 2048 with random directions")
    parser.add_argument(
        "--delay",
        type=int,
        default=100,
        help="Delay between moves in milliseconds (default: 100)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress step-by-step output",
    )
    parser.add_argument(
        "--games",
        type=int,
        default=1,
        help="Number of games to play (default: 1)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=100000,
        help="Stop a game after this many turns (default: 100000)",
    )
    args = parser.parse_args()
    setup_logging()

    rng = random.Random(args.seed)
    delay_sec = args.delay / 1000.0

    results = []
    for _ in tqdm(range(args.games), disable=not args.quiet or args.games == 1, desc="Playing"):
        result = play_game(rng, args.max_steps, delay_sec, show=not args.quiet)
        logger.info("Game ended: %s", result)
        results.append(result)

        if not args.quiet:
            print(f"Result: {result['state'].name}")
            print(f"Max Tile: {result['max_tile']}")
            print(f"Total Steps: {result['steps']}")

    if args.games > 1:
        wins = sum(r["state"] == GameState.WIN for r in results)
        losses = sum(r["state"] == GameState.LOSE for r in results)
        max_tiles = [r["max_tile"] for r in results]
        steps_list = [r["steps"] for r in results]

        print("\n=== Summary ===")
        print(f"Games: {args.games}")
        print(f"Wins: {wins}")
        print(f"Losses: {losses}")
        print(f"Avg Max Tile: {sum(max_tiles) / len(max_tiles):.1f}")
        print(f"Best Max Tile: {max(max_tiles)}")
        print(f"Avg Steps: {sum(steps_list) / len(steps_list):.1f}")


if __name__ == "__main__":
    main()
