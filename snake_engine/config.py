"""
Engine configuration.

Every tunable has an in-code default (see domain.constants) and can be
overridden from the environment, e.g. a .env file loaded by the entry
points with python-dotenv:

    SNAKE_DIFFICULTY=HARD
    SNAKE_GRID_SIZE=24
    SNAKE_POWER_UP_PROBABILITY=0.5
"""

import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Dict, Optional, Tuple

from .domain import constants


@dataclass(frozen=True)
class EngineConfig:
    initial_grid_size: int = constants.INITIAL_GRID_SIZE
    initial_speed_ms: Optional[int] = None  # None -> difficulty base speed
    difficulty: str = constants.DEFAULT_DIFFICULTY
    min_speed_ms: int = constants.MIN_SPEED_MS
    speed_step_ms: int = constants.SPEED_STEP_MS
    speed_power_up_step_ms: int = constants.SPEED_POWER_UP_STEP_MS
    speed_interval: int = constants.SPEED_INTERVAL
    grid_growth_interval: int = constants.GRID_GROWTH_INTERVAL
    grid_growth_step: int = constants.GRID_GROWTH_STEP
    max_grid_size: int = constants.MAX_GRID_SIZE
    power_up_probability: float = constants.POWER_UP_PROBABILITY
    multiplier_duration_ms: int = constants.MULTIPLIER_DURATION_MS
    multiplier_factor: int = constants.MULTIPLIER_FACTOR
    input_queue_size: int = constants.INPUT_QUEUE_SIZE
    start_position: Optional[Tuple[int, int]] = None  # None -> grid centre
    first_food: Optional[Tuple[int, int]] = constants.FIRST_FOOD

    @property
    def base_speed_ms(self) -> int:
        if self.initial_speed_ms is not None:
            return self.initial_speed_ms
        return constants.DIFFICULTY_SETTINGS[self.difficulty]["speed"]

    @property
    def start_cell(self) -> Tuple[int, int]:
        if self.start_position is not None:
            return self.start_position
        centre = self.initial_grid_size // 2
        return (centre, centre)

    @property
    def difficulty_multiplier(self) -> float:
        return constants.DIFFICULTY_SETTINGS[self.difficulty]["multiplier"]

    def validate(self) -> "EngineConfig":
        """
        Check the configuration for values the engine cannot run with.

        Returns:
            self, so calls can be chained

        Raises:
            ValueError: on the first invalid field
        """
        if self.difficulty not in constants.DIFFICULTY_SETTINGS:
            available = ", ".join(constants.DIFFICULTY_SETTINGS)
            raise ValueError(
                f"Unknown difficulty '{self.difficulty}'. Available difficulties: {available}"
            )
        if self.max_grid_size < constants.MIN_GRID_SIZE:
            raise ValueError(f"max_grid_size must be at least {constants.MIN_GRID_SIZE}")
        if not constants.MIN_GRID_SIZE <= self.initial_grid_size <= self.max_grid_size:
            raise ValueError(
                f"initial_grid_size must be between {constants.MIN_GRID_SIZE} "
                f"and {self.max_grid_size}, got {self.initial_grid_size}"
            )
        if not 0.0 <= self.power_up_probability <= 1.0:
            raise ValueError(
                f"power_up_probability must be within [0, 1], got {self.power_up_probability}"
            )
        positive_fields = (
            "min_speed_ms", "speed_step_ms", "speed_power_up_step_ms", "speed_interval",
            "grid_growth_interval", "multiplier_duration_ms", "multiplier_factor",
        )
        for name in positive_fields:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.grid_growth_step < 0:
            raise ValueError(f"grid_growth_step must not be negative, got {self.grid_growth_step}")
        if self.base_speed_ms < self.min_speed_ms:
            raise ValueError(
                f"Initial speed {self.base_speed_ms}ms is below the {self.min_speed_ms}ms floor"
            )
        if self.input_queue_size < 1:
            raise ValueError(f"input_queue_size must be at least 1, got {self.input_queue_size}")
        if self.start_position is not None:
            sx, sy = self.start_position
            if not (0 <= sx < self.initial_grid_size and 0 <= sy < self.initial_grid_size):
                raise ValueError(f"start_position {self.start_position} is outside the grid")
        return self

    def with_overrides(self, **overrides: Any) -> "EngineConfig":
        """Return a copy with the given fields replaced (None values are skipped)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["base_speed_ms"] = self.base_speed_ms
        data["difficulty_multiplier"] = self.difficulty_multiplier
        return data

    @classmethod
    def from_env(cls, prefix: str = "SNAKE_") -> "EngineConfig":
        """
        Build a configuration from environment variables.

        Unset variables keep their defaults. Malformed numbers raise
        ValueError naming the offending variable.
        """
        env_fields: Dict[str, Tuple[str, Callable[[str], Any]]] = {
            "initial_grid_size": ("GRID_SIZE", int),
            "initial_speed_ms": ("INITIAL_SPEED_MS", int),
            "difficulty": ("DIFFICULTY", lambda v: v.strip().upper()),
            "min_speed_ms": ("MIN_SPEED_MS", int),
            "speed_step_ms": ("SPEED_STEP_MS", int),
            "speed_power_up_step_ms": ("SPEED_POWER_UP_STEP_MS", int),
            "speed_interval": ("SPEED_INTERVAL", int),
            "grid_growth_interval": ("GRID_GROWTH_INTERVAL", int),
            "grid_growth_step": ("GRID_GROWTH_STEP", int),
            "max_grid_size": ("MAX_GRID_SIZE", int),
            "power_up_probability": ("POWER_UP_PROBABILITY", float),
            "multiplier_duration_ms": ("MULTIPLIER_DURATION_MS", int),
            "multiplier_factor": ("MULTIPLIER_FACTOR", int),
            "input_queue_size": ("INPUT_QUEUE_SIZE", int),
        }

        values: Dict[str, Any] = {}
        for field_name, (suffix, parse) in env_fields.items():
            var = f"{prefix}{suffix}"
            raw = os.getenv(var)
            if raw is None or raw.strip() == "":
                continue
            try:
                values[field_name] = parse(raw)
            except ValueError:
                raise ValueError(f"Invalid value for {var}: '{raw}'") from None

        return cls(**values).validate()
