import os
import random

import pytest

from snake_engine.config import EngineConfig
from snake_engine.domain.constants import RIGHT
from snake_engine.domain.game_state import GameSnapshot
from snake_engine.domain.snake import Snake
from snake_engine.engine.game_engine import GameEngine


@pytest.fixture(autouse=True)
def clean_snake_env(monkeypatch):
    """Keep SNAKE_* variables from the host environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("SNAKE_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def make_engine():
    """
    Factory for engines with power-ups disabled and a seeded rng, so tests
    only see the random behaviour they opt into.
    """

    def _make(seed=1234, **overrides):
        overrides.setdefault("power_up_probability", 0.0)
        return GameEngine(EngineConfig(**overrides), rng=random.Random(seed))

    return _make


@pytest.fixture
def set_board():
    """Place the snake (head first), its direction and optionally the food."""

    def _set(engine, snake, direction=RIGHT, food=None, grid_size=None):
        state = engine.state
        state.snake = Snake(snake)
        state.direction = direction
        engine.input.reset(direction)
        state.pending_direction = None
        if food is not None:
            state.food = food
        if grid_size is not None:
            state.grid_size = grid_size
        return engine

    return _set


@pytest.fixture
def make_snapshot():
    def _make(snake, direction=RIGHT, food=(15, 15), grid_size=20, **overrides):
        values = dict(
            snake=tuple(snake),
            food=food,
            power_up=None,
            direction=direction,
            pending_direction=None,
            score=0,
            high_score=0,
            speed_ms=150,
            speed_level=0,
            grid_size=grid_size,
            score_multiplier=1,
            shield_active=False,
            phase="RUNNING",
            difficulty="MEDIUM",
        )
        values.update(overrides)
        return GameSnapshot(**values)

    return _make
