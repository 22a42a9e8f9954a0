"""
Difficulty escalation: faster ticks and a bigger board as the score climbs.
"""

import logging
from typing import Optional, Tuple

from ..config import EngineConfig

logger = logging.getLogger(__name__)


class DifficultyController:
    """
    Applies the speed-up and grid-growth rules for each new score value.

    A score value is only ever applied once, so calling on_scored twice
    for the same score cannot double the effect.
    """

    def __init__(self, config: EngineConfig):
        self.config = config
        self._last_score: Optional[int] = None

    def reset(self) -> None:
        self._last_score = None

    def apply_speed_boost(self, speed_ms: int, step: int) -> int:
        return max(speed_ms - step, self.config.min_speed_ms)

    def on_scored(self, score: int, speed_ms: int, grid_size: int) -> Tuple[int, int]:
        if score <= 0 or score == self._last_score:
            return speed_ms, grid_size
        self._last_score = score

        cfg = self.config
        if score % cfg.speed_interval == 0:
            speed_ms = self.apply_speed_boost(speed_ms, cfg.speed_step_ms)
            logger.debug(f"Score {score}: tick interval now {speed_ms}ms")

        if score % cfg.grid_growth_interval == 0:
            new_size = min(grid_size + cfg.grid_growth_step, cfg.max_grid_size)
            if new_size != grid_size:
                logger.info(f"Score {score}: grid grows from {grid_size} to {new_size}")
            grid_size = new_size

        return speed_ms, grid_size
