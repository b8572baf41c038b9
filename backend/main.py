#!/usr/bin/env python3
"""
Game driver: runs the snake engine on a fixed cadence.

Usage:
    python main.py
    python main.py --player scripted --keys dddsss

Examples:
    # Let the autopilot play a reproducible game without waiting between ticks
    python main.py --seed 42 --tick-delay-ms 0

    # Replay key presses (w/a/s/d steer, space pauses, q quits)
    python main.py --player scripted --keys "ddd ssq"
"""

import argparse
import json
import logging
import random
import time
from typing import Dict, Optional, Callable

import config
from domain.game import Game
from domain.game_state import GameState
from players import Player, get_player_class, list_variants

logger = logging.getLogger(__name__)


def render_frame(game_state: GameState) -> str:
    """Build the text frame shown after every tick."""
    header = f"Score : {game_state.score}\tLength : {game_state.length}"
    return f"{header}\n\n{game_state.print_board()}\n"


def run_simulation(
    game: Game,
    player: Player,
    max_rounds: int = config.MAX_ROUNDS,
    tick_delay: float = config.TICK_DELAY_MS / 1000,
    render: Optional[Callable[[GameState], None]] = None,
) -> Dict:
    """
    Drive a game until it ends.

    Each round the player is asked for input, the direction is applied, the
    game ticks (unless paused) and the frame is rendered.

    Args:
        game: the engine; started here if the caller has not started it
        player: input source polled once per round
        max_rounds: stop after this many rounds even if the game is still running
        tick_delay: seconds to sleep between rounds
        render: optional callback receiving the state after every round

    Returns:
        A dictionary summarizing the run (result, score, length, rounds).
    """
    if not game.started:
        game.start()
    if render:
        render(game.get_current_state())

    result = "max_rounds"
    rounds = 0
    while rounds < max_rounds:
        if tick_delay > 0:
            time.sleep(tick_delay)
        rounds += 1

        move = player.get_move(game.get_current_state())
        if getattr(player, "quit_requested", False):
            result = "quit"
            break
        if move is not None:
            game.set_direction(move)

        if getattr(player, "paused", False):
            continue

        game.tick()
        if render:
            render(game.get_current_state())

        if game.is_over():
            result = "game_over"
            break
        if game.is_win():
            result = "win"
            break

    summary = {
        "result": result,
        "score": game.score(),
        "length": game.length(),
        "rounds": rounds,
    }
    logger.info(f"Finished after {rounds} rounds: {result}, score {game.score()}")
    return summary


def build_player(variant: str, keys: str, rng: random.Random) -> Player:
    player_class = get_player_class(variant)
    if variant == "scripted":
        return player_class(keys)
    return player_class(rng=rng)


def main():
    parser = argparse.ArgumentParser(
        description='Run a single-player snake game.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--player", type=str, default="random",
                        choices=[v["key"] for v in list_variants()],
                        help="Who steers the snake")
    parser.add_argument("--keys", type=str, default="",
                        help="Key presses for the scripted player, one per tick")
    parser.add_argument("--seed", type=int, default=config.get_seed(),
                        help="Seed for snake and food placement")
    parser.add_argument("--max-rounds", type=int, default=config.MAX_ROUNDS,
                        help="Maximum number of rounds")
    parser.add_argument("--tick-delay-ms", type=int, default=config.TICK_DELAY_MS,
                        help="Milliseconds between ticks")
    parser.add_argument("--no-render", action="store_true",
                        help="Do not print the board after each tick")

    args = parser.parse_args()

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    rng = random.Random(args.seed)
    game = Game(rng=rng)
    player = build_player(args.player, args.keys, rng)
    render = None if args.no_render else (lambda state: print(render_frame(state)))

    result = run_simulation(
        game,
        player,
        max_rounds=args.max_rounds,
        tick_delay=args.tick_delay_ms / 1000,
        render=render,
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
