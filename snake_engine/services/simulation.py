"""
Headless simulation on a simulated clock.

Each iteration hands the engine exactly one tick interval, so a whole
game runs as fast as the CPU allows and is reproducible from its seed.
"""

import logging
import random
from typing import Any, Callable, Dict, Optional

from ..config import EngineConfig
from ..domain.constants import PAUSED, TERMINAL_PHASES
from ..domain.game_state import GameSnapshot
from ..engine.game_engine import GameEngine
from ..players.base import Player
from ..players.random_player import RandomPlayer

logger = logging.getLogger(__name__)


def summarize(engine: GameEngine) -> Dict[str, Any]:
    snapshot = engine.snapshot()
    return {
        "phase": snapshot.phase,
        "score": snapshot.score,
        "high_score": snapshot.high_score,
        "steps": snapshot.steps,
        "length": len(snapshot.snake),
        "grid_size": snapshot.grid_size,
        "speed_ms": snapshot.speed_ms,
        "difficulty": snapshot.difficulty,
    }


def play_game(
    engine: GameEngine,
    player: Player,
    max_steps: int = 10_000,
    on_step: Optional[Callable[[GameSnapshot], None]] = None,
) -> Dict[str, Any]:
    """
    Play the engine's current game to the end (or max_steps).

    Returns:
        A dictionary summarizing the game
    """
    steps = 0
    while steps < max_steps and engine.phase not in TERMINAL_PHASES:
        if engine.phase == PAUSED:
            logger.info("Game is paused; stopping the simulation")
            break
        move = player.get_move(engine.snapshot())
        if move is not None:
            engine.change_direction(move)
        if engine.tick(engine.state.speed_ms):
            steps += 1
            if on_step is not None:
                on_step(engine.snapshot())

    if engine.phase not in TERMINAL_PHASES:
        logger.info(f"Stopping after {steps} steps without a finished game")
    return summarize(engine)


def run_simulation(
    config: Optional[EngineConfig] = None,
    player: Optional[Player] = None,
    max_steps: int = 10_000,
    seed: Optional[int] = None,
    on_step: Optional[Callable[[GameSnapshot], None]] = None,
) -> Dict[str, Any]:
    """
    Runs a single headless game.

    Args:
        config: engine configuration (defaults if omitted)
        player: autoplayer; a seeded RandomPlayer if omitted
        max_steps: upper limit on simulation steps
        seed: seed for both the engine and the default player
        on_step: called with the snapshot after every step

    Returns:
        A dictionary summarizing the game results (phase, score, steps, ...).
    """
    engine = GameEngine(config, rng=random.Random(seed))
    if player is None:
        player = RandomPlayer(rng=random.Random(seed))
    return play_game(engine, player, max_steps=max_steps, on_step=on_step)
