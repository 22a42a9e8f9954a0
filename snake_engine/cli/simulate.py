#!/usr/bin/env python3
"""
CLI tool to play headless Snake games with an autoplayer

Usage:
    snake-simulate [--player random|greedy] [--games N] [--seed S]

Examples:
    # One game with the random player
    snake-simulate

    # Ten greedy games on HARD, summary as JSON
    snake-simulate --player greedy --games 10 --difficulty HARD --json

    # Watch a game in real time, printing the board after every step
    snake-simulate --player greedy --realtime --show-board
"""

import argparse
import json
import logging
import random
import sys

from dotenv import load_dotenv

from ..config import EngineConfig
from ..domain.constants import DIFFICULTY_SETTINGS
from ..engine.game_engine import GameEngine
from ..players.variant_registry import AVAILABLE_VARIANTS, get_player_class
from ..services.session import GameSession
from ..services.simulation import play_game, summarize
from ..services.ticker import Ticker

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def print_board(snapshot):
    print("\n" + snapshot.render_board())
    print(
        f"Score: {snapshot.score}  High Score: {snapshot.high_score}  "
        f"Speed: {snapshot.speed_level}  x{snapshot.score_multiplier}"
        + ("  [shield]" if snapshot.shield_active else "")
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Play headless Snake games with an autoplayer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--player', choices=AVAILABLE_VARIANTS, default='random',
                        help='Autoplayer variant (default: random)')
    parser.add_argument('--games', type=int, default=1,
                        help='Number of games to play back to back (default: 1)')
    parser.add_argument('--max-steps', type=int, default=10_000,
                        help='Step limit per game (default: 10000)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for reproducible games')
    parser.add_argument('--difficulty', type=str.upper, choices=list(DIFFICULTY_SETTINGS),
                        default=None, help='Override SNAKE_DIFFICULTY')
    parser.add_argument('--grid-size', type=int, default=None,
                        help='Override SNAKE_GRID_SIZE')
    parser.add_argument('--show-board', action='store_true',
                        help='Print the board after every step')
    parser.add_argument('--realtime', action='store_true',
                        help='Drive the game with the wall-clock ticker instead of a simulated clock')
    parser.add_argument('--json', action='store_true',
                        help='Print the results as JSON')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.games < 1:
        logger.error("--games must be at least 1")
        return 1

    try:
        config = EngineConfig.from_env().with_overrides(
            difficulty=args.difficulty,
            initial_grid_size=args.grid_size,
        ).validate()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    rng = random.Random(args.seed)
    engine = GameEngine(config, rng=rng)
    player = get_player_class(args.player)(rng=random.Random(args.seed))
    on_step = print_board if args.show_board else None

    results = []
    for game_number in range(1, args.games + 1):
        if game_number > 1:
            engine.restart()

        if args.realtime:
            ticker = Ticker(GameSession(engine), player=player, on_frame=on_step)
            try:
                ticker.run(max_frames=None)
            except KeyboardInterrupt:
                ticker.stop()
                logger.info("Interrupted")
                results.append(summarize(engine))
                break
            result = summarize(engine)
        else:
            result = play_game(engine, player, max_steps=args.max_steps, on_step=on_step)

        result["game"] = game_number
        results.append(result)
        if not args.json:
            print(
                f"Game {game_number}: {result['phase']} after {result['steps']} steps, "
                f"score {result['score']} (high score {result['high_score']}), length {result['length']}"
            )

    if args.json:
        print(json.dumps(results, indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
