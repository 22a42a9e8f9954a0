"""
The tick-driven snake simulation.

GameEngine owns the one GameState record. It is only mutated through
tick(), the pause/resume/restart calls and the input entry points, and
every call runs to completion before returning, so a snapshot taken
between calls is always consistent.
"""

import logging
import math
import random
from typing import Optional

from ..config import EngineConfig
from ..domain.constants import (
    MULTIPLIER, OVER, PAUSED, RUNNING, SHIELD, SPEED, START_DIRECTION,
    TERMINAL_PHASES, WON,
)
from ..domain.game_state import GameSnapshot, GameState, PowerUp
from ..domain.geometry import advance, is_interior
from ..domain.snake import Snake
from .collision import check_food_pickup, check_power_up_pickup, check_self_collision
from .difficulty import DifficultyController
from .input_mapper import InputMapper, is_pause_key, is_restart_key
from .scoreboard import Scoreboard
from .spawner import Spawner

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Manages:
      - The snake, food and optional power-up
      - Buffered direction input
      - Score, high score and the timed score multiplier
      - Speed-up and grid growth as the score climbs
      - The RUNNING / PAUSED / OVER / WON phase machine
    """

    def __init__(self, config: Optional[EngineConfig] = None, rng: Optional[random.Random] = None):
        self.config = (config or EngineConfig()).validate()
        self.rng = rng or random.Random()

        cfg = self.config
        self.spawner = Spawner(
            rng=self.rng,
            power_up_probability=cfg.power_up_probability,
            multiplier_duration_ms=cfg.multiplier_duration_ms,
        )
        self.difficulty = DifficultyController(cfg)
        self.scoreboard = Scoreboard(cfg.difficulty_multiplier)
        self.input = InputMapper(START_DIRECTION, queue_size=cfg.input_queue_size)
        self.state = self._new_state()

    # ---------- lifecycle ----------
    def _new_state(self) -> GameState:
        cfg = self.config
        snake = Snake([cfg.start_cell])
        grid_size = cfg.initial_grid_size

        food = cfg.first_food
        if food is None or not is_interior(food, grid_size) or food in snake:
            food = self.spawner.place_food(snake.occupied(), grid_size)

        state = GameState(
            snake=snake,
            food=food,
            grid_size=grid_size,
            speed_ms=cfg.base_speed_ms,
            base_speed_ms=cfg.base_speed_ms,
            difficulty=cfg.difficulty,
            direction=START_DIRECTION,
            high_score=self.scoreboard.high_score,
        )
        logger.info(
            f"New game: grid {grid_size}x{grid_size}, difficulty {cfg.difficulty}, "
            f"tick every {state.speed_ms}ms"
        )
        return state

    def restart(self) -> GameSnapshot:
        """Start a fresh game from any phase. Only the high score carries over."""
        self.scoreboard.finalize()
        self.scoreboard.reset()
        self.difficulty.reset()
        self.input.reset(START_DIRECTION)
        self.state = self._new_state()
        return self.snapshot()

    def _finish(self, phase: str) -> None:
        state = self.state
        state.phase = phase
        state.high_score = self.scoreboard.finalize()
        if phase == WON:
            logger.info(f"Board full after {state.steps} steps. Final score: {state.score}")
        else:
            logger.info(f"Game Over after {state.steps} steps. Final score: {state.score}, high score: {state.high_score}")

    # ---------- phase control ----------
    @property
    def phase(self) -> str:
        return self.state.phase

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def high_score(self) -> int:
        return self.state.high_score

    def pause(self) -> bool:
        if self.state.phase != RUNNING:
            return False
        self.state.phase = PAUSED
        logger.info("Game paused")
        return True

    def resume(self) -> bool:
        if self.state.phase != PAUSED:
            return False
        self.state.phase = RUNNING
        logger.info("Game resumed")
        return True

    def toggle_pause(self) -> bool:
        if self.state.phase == RUNNING:
            return self.pause()
        return self.resume()

    # ---------- input ----------
    def change_direction(self, direction: str) -> bool:
        changed = self.input.submit_direction(direction)
        self.state.pending_direction = self.input.pending
        return changed

    def submit_input(self, raw_key) -> bool:
        """
        Route a raw key: pause keys toggle pause, restart keys restart a
        finished game and direction keys are buffered. Anything else is
        ignored.

        Returns:
            True if the key changed anything
        """
        if is_pause_key(raw_key):
            return self.toggle_pause()
        if is_restart_key(raw_key):
            if self.state.phase in TERMINAL_PHASES:
                self.restart()
                return True
            return False
        changed = self.input.submit(raw_key)
        self.state.pending_direction = self.input.pending
        return changed

    # ---------- simulation ----------
    def tick(self, elapsed_ms: float) -> bool:
        """
        Advance the simulation clock by ``elapsed_ms`` (time since the
        previous tick call) and apply at most one step.

        Returns:
            True if a step was applied
        """
        state = self.state
        if state.phase != RUNNING:
            return False
        # Non-finite and negative elapsed times count as zero
        if not elapsed_ms or not math.isfinite(elapsed_ms) or elapsed_ms < 0:
            elapsed_ms = 0

        state.clock_ms += elapsed_ms
        state.since_last_step_ms += elapsed_ms
        if state.since_last_step_ms < state.speed_ms:
            return False

        # A late tick still applies exactly one step; the remainder is dropped.
        state.since_last_step_ms = 0
        self._step()
        return True

    def _step(self) -> None:
        state = self.state
        state.steps += 1
        self._expire_effects()

        direction = self.input.consume_pending()
        if direction is not None:
            state.direction = direction
        state.pending_direction = self.input.pending

        new_head = advance(state.snake.head, state.direction, state.grid_size)

        if check_self_collision(state.snake, new_head):
            if state.shield_active:
                state.shield_active = False
                logger.info(f"Shield absorbed a collision at {new_head}")
                return
            self._finish(OVER)
            return

        state.snake.push_head(new_head)

        if check_food_pickup(new_head, state.food):
            self._eat_food()
        else:
            state.snake.drop_tail()

        if check_power_up_pickup(new_head, state.power_up):
            self._apply_power_up(state.power_up)
            state.power_up = None

        if state.food is None:
            self._finish(WON)
            return

        logger.debug(
            f"Step {state.steps}: head={new_head} length={len(state.snake)} "
            f"score={state.score} speed={state.speed_ms}ms"
        )

    def _eat_food(self) -> None:
        state = self.state

        self.scoreboard.award(state.score_multiplier)
        state.score = self.scoreboard.score

        occupied = state.snake.occupied()
        if state.power_up is not None:
            occupied.add(state.power_up.position)
        state.food = self.spawner.place_food(occupied, state.grid_size)

        if state.power_up is None and state.food is not None:
            state.power_up = self.spawner.maybe_spawn_power_up(
                state.grid_size, occupied | {state.food}
            )
            if state.power_up is not None:
                logger.info(f"Spawned {state.power_up.kind} power-up at {state.power_up.position}")

        previous_grid = state.grid_size
        state.speed_ms, state.grid_size = self.difficulty.on_scored(
            state.score, state.speed_ms, state.grid_size
        )

        # A grown board may have room where the old one had none
        if state.food is None and state.grid_size > previous_grid:
            state.food = self.spawner.place_food(occupied, state.grid_size)

    def _apply_power_up(self, power_up: PowerUp) -> None:
        state = self.state
        cfg = self.config

        if power_up.kind == SPEED:
            state.speed_ms = self.difficulty.apply_speed_boost(state.speed_ms, cfg.speed_power_up_step_ms)
        elif power_up.kind == MULTIPLIER:
            duration = power_up.duration_ms or cfg.multiplier_duration_ms
            state.score_multiplier *= cfg.multiplier_factor
            state.multiplier_expiry_ms = state.clock_ms + duration
        elif power_up.kind == SHIELD:
            state.shield_active = True

        logger.info(f"Picked up {power_up.kind} power-up at {power_up.position}")

    def _expire_effects(self) -> None:
        state = self.state
        if state.multiplier_expiry_ms is not None and state.clock_ms >= state.multiplier_expiry_ms:
            state.score_multiplier = 1
            state.multiplier_expiry_ms = None
            logger.debug("Score multiplier expired")

    # ---------- output ----------
    def snapshot(self) -> GameSnapshot:
        return self.state.snapshot()

    def __repr__(self):
        state = self.state
        return f"<GameEngine phase={state.phase} score={state.score} steps={state.steps}>"
