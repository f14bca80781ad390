"""
Headless Neon Snake runner.

Plays one game in the terminal with the RandomPlayer autopilot standing in
for the keyboard, printing the board after every tick.
"""

import argparse
import json
import logging
import random
import time
from typing import Dict, Any, Optional

from dotenv import load_dotenv

from config import GameConfig, load_config
from data_access.high_score import InMemoryHighScoreStore
from engine import SnakeGame
from players import Player, RandomPlayer

load_dotenv()


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    config: GameConfig,
    player: Player,
    max_ticks: int = 1000,
    interval: float = 0.0,
    seed: Optional[int] = None,
    persist: bool = False,
    show_board: bool = True
) -> Dict[str, Any]:
    """
    Runs a single game driven by player.

    Args:
        config: Board size, apple count and high score key.
        player: Input collaborator asked for a direction before every tick.
        max_ticks: Stop after this many ticks even if the snake is alive.
        interval: Seconds to sleep between ticks (0 runs as fast as possible).
        seed: Seed for apple placement.
        persist: Save the high score to the database instead of memory.
        show_board: Print the board after every tick.

    Returns:
        A dictionary summarizing the game (game_id, score, high_score, ticks, ...).
    """
    store = None if persist else InMemoryHighScoreStore(key=config.high_score_key)
    game = SnakeGame(config, high_score_store=store, seed=seed)
    game.resume()

    while not game.game_over and game.state.tick < max_ticks:
        state = game.get_current_state()
        move = player.get_move(state)
        game.set_heading(move)
        game.tick()

        if show_board:
            game.print_board()
        if interval > 0:
            time.sleep(interval)

    final_state = game.get_current_state()
    return {
        "game_id": game.game_id,
        "player": player.name,
        "score": final_state.score,
        "high_score": final_state.high_score,
        "ticks": final_state.tick,
        "length": len(final_state.snake),
        "game_over": final_state.game_over,
        "death_reason": final_state.death_reason
    }


# -------------------------------
# Main Entry Point
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Play Neon Snake in the terminal with an autopilot player."
    )
    defaults = load_config()
    parser.add_argument("--grid-size", type=int, default=defaults.grid_size,
                        help="Board is N x N cells")
    parser.add_argument("--apples", type=int, default=defaults.apple_count,
                        help="Number of apples on the board")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for apples and the autopilot")
    parser.add_argument("--max-ticks", type=int, default=1000,
                        help="Maximum number of ticks")
    parser.add_argument("--interval", type=float, default=defaults.tick_interval_seconds,
                        help="Seconds between ticks (0 for as fast as possible)")
    parser.add_argument("--persist", action="store_true",
                        help="Read and save the high score in the database")
    parser.add_argument("--quiet", action="store_true",
                        help="Only print the final summary")

    args = parser.parse_args()
    logging.basicConfig(level=logging.WARNING if args.quiet else logging.INFO)

    config = GameConfig(
        grid_size=args.grid_size,
        apple_count=args.apples,
        tick_interval_ms=defaults.tick_interval_ms,
        high_score_key=defaults.high_score_key,
    )
    player = RandomPlayer(rng=random.Random(args.seed))

    result = run_simulation(
        config,
        player,
        max_ticks=args.max_ticks,
        interval=args.interval,
        seed=args.seed,
        persist=args.persist,
        show_board=not args.quiet
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
