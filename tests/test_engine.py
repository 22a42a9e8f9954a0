"""
Tests for GameEngine: movement, timing, scoring, power-ups and phases.
"""

from unittest.mock import Mock

import pytest

from snake_engine.config import EngineConfig
from snake_engine.domain.constants import (
    DOWN, LEFT, MULTIPLIER, OVER, PAUSED, RIGHT, RUNNING, SHIELD, SPEED, UP, WON,
)
from snake_engine.domain.game_state import PowerUp
from snake_engine.domain.geometry import is_interior
from snake_engine.engine.game_engine import GameEngine

# Head (5, 5) travelling LEFT with its body curled below it: turning DOWN bites (5, 6)
CURLED_SNAKE = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)]


class TestInitialState:
    def test_new_game_defaults(self, make_engine):
        snapshot = make_engine().snapshot()

        assert snapshot.snake == ((10, 10),)
        assert snapshot.food == (15, 15)
        assert snapshot.direction == RIGHT
        assert snapshot.phase == RUNNING
        assert snapshot.score == 0
        assert snapshot.speed_ms == 150
        assert snapshot.speed_level == 0
        assert snapshot.grid_size == 20
        assert snapshot.power_up is None
        assert snapshot.pending_direction is None

    def test_first_food_falls_back_when_off_the_band(self, make_engine):
        """On a small board the fixed first food cell is replaced by a random one."""
        engine = make_engine(initial_grid_size=10)
        food = engine.state.food

        assert food != (15, 15)
        assert is_interior(food, 10)
        assert food not in engine.state.snake

    def test_invalid_config_rejected(self):
        with pytest.raises(ValueError):
            GameEngine(EngineConfig(difficulty="INSANE"))
        with pytest.raises(ValueError):
            GameEngine(EngineConfig(initial_grid_size=3))

    def test_difficulty_sets_starting_speed(self, make_engine):
        assert make_engine(difficulty="EASY").state.speed_ms == 200
        assert make_engine(difficulty="HARD").state.speed_ms == 100
        assert make_engine(difficulty="HARD", initial_speed_ms=120).state.speed_ms == 120


class TestTick:
    """Timing: elapsed time accumulates and at most one step applies per call."""

    def test_step_moves_head_one_cell(self, make_engine):
        engine = make_engine()

        assert engine.tick(150) is True
        assert engine.snapshot().snake == ((11, 10),)
        assert engine.snapshot().steps == 1

    def test_tick_below_interval_is_a_no_op(self, make_engine):
        engine = make_engine()
        before = engine.snapshot()

        assert engine.tick(149) is False
        assert engine.snapshot() == before

    def test_elapsed_time_accumulates(self, make_engine):
        engine = make_engine()

        assert engine.tick(100) is False
        assert engine.tick(50) is True
        assert engine.snapshot().head == (11, 10)

    def test_late_tick_applies_single_step(self, make_engine):
        """A long gap catches up by one step only; the remainder is dropped."""
        engine = make_engine()

        assert engine.tick(1000) is True
        assert engine.snapshot().head == (11, 10)
        assert engine.tick(0) is False
        assert engine.snapshot().head == (11, 10)

    def test_negative_elapsed_counts_as_zero(self, make_engine):
        engine = make_engine()
        engine.tick(100)
        assert engine.tick(-500) is False
        assert engine.tick(50) is True

    def test_non_finite_elapsed_counts_as_zero(self, make_engine):
        """NaN and infinities never step the snake or disturb the clock."""
        engine = make_engine()
        before = engine.snapshot()

        for elapsed in (float("nan"), float("inf"), float("-inf")):
            assert engine.tick(elapsed) is False
        assert engine.snapshot() == before
        assert engine.state.clock_ms == 0

        assert engine.tick(150) is True
        assert engine.state.clock_ms == 150

    def test_easy_waits_for_longer_interval(self, make_engine):
        engine = make_engine(difficulty="EASY")

        assert engine.tick(150) is False
        assert engine.tick(50) is True

    def test_wraps_through_left_edge(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, [(0, 10), (1, 10)], direction=LEFT)

        engine.tick(150)

        assert engine.snapshot().snake == ((19, 10), (0, 10))
        assert engine.phase == RUNNING


class TestDirection:
    def test_turn_applies_on_next_step(self, make_engine):
        engine = make_engine()
        assert engine.submit_input("ArrowUp") is True
        assert engine.snapshot().pending_direction == UP

        engine.tick(150)

        snapshot = engine.snapshot()
        assert snapshot.head == (10, 9)
        assert snapshot.direction == UP
        assert snapshot.pending_direction is None

    def test_reversal_is_ignored(self, make_engine):
        engine = make_engine()

        assert engine.change_direction(LEFT) is False
        engine.tick(150)
        assert engine.snapshot().head == (11, 10)

    def test_unknown_key_is_ignored(self, make_engine):
        engine = make_engine()
        before = engine.snapshot()

        assert engine.submit_input("q") is False
        assert engine.snapshot() == before


class TestCollision:
    def test_self_collision_ends_game(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, CURLED_SNAKE, direction=LEFT)
        engine.scoreboard.score = engine.state.score = 4
        engine.submit_input("ArrowDown")

        assert engine.tick(150) is True

        snapshot = engine.snapshot()
        assert snapshot.phase == OVER
        assert snapshot.high_score == 4
        assert snapshot.snake == tuple(CURLED_SNAKE)

    def test_finished_game_ignores_ticks(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, CURLED_SNAKE, direction=LEFT)
        engine.change_direction(DOWN)
        engine.tick(150)
        finished = engine.snapshot()

        assert engine.tick(1000) is False
        assert engine.pause() is False
        assert engine.snapshot() == finished


class TestScoring:
    def test_eating_grows_and_scores(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, [(10, 10)], food=(11, 10))

        engine.tick(150)

        snapshot = engine.snapshot()
        assert snapshot.snake == ((11, 10), (10, 10))
        # MEDIUM: floor(1 * 1 * 1.5)
        assert snapshot.score == 1
        assert snapshot.food is not None
        assert snapshot.food not in snapshot.snake

    def test_active_multiplier_scales_points(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, [(10, 10)], food=(11, 10))
        engine.state.score_multiplier = 2

        engine.tick(150)

        assert engine.snapshot().score == 3

    def test_third_point_speeds_up(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, [(10, 10)], food=(11, 10))
        engine.scoreboard.score = engine.state.score = 2

        engine.tick(150)

        snapshot = engine.snapshot()
        assert snapshot.score == 3
        assert snapshot.speed_ms == 130
        assert snapshot.speed_level == 20

    def test_sixth_point_grows_grid(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, [(10, 10)], food=(11, 10))
        engine.scoreboard.score = engine.state.score = 5

        engine.tick(150)

        snapshot = engine.snapshot()
        assert snapshot.grid_size == 22
        assert snapshot.speed_ms == 130


class TestPowerUps:
    def test_multiplier_expires_on_simulated_clock(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, [(10, 10)])
        engine.state.power_up = PowerUp((11, 10), MULTIPLIER, 5000)

        engine.tick(150)
        assert engine.snapshot().score_multiplier == 2
        assert engine.snapshot().power_up is None

        engine.tick(4000)
        assert engine.snapshot().score_multiplier == 2

        engine.tick(1000)
        assert engine.snapshot().score_multiplier == 1

    def test_speed_power_up(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, [(10, 10)])
        engine.state.power_up = PowerUp((11, 10), SPEED)

        engine.tick(150)

        assert engine.snapshot().speed_ms == 120

    def test_speed_power_up_respects_floor(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, [(10, 10)])
        engine.state.speed_ms = 60
        engine.state.power_up = PowerUp((11, 10), SPEED)

        engine.tick(60)

        assert engine.snapshot().speed_ms == 50

    def test_shield_absorbs_one_collision(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, CURLED_SNAKE, direction=LEFT)
        engine.state.shield_active = True
        engine.submit_input("ArrowDown")

        assert engine.tick(150) is True
        snapshot = engine.snapshot()
        assert snapshot.phase == RUNNING
        assert snapshot.shield_active is False
        assert snapshot.snake == tuple(CURLED_SNAKE)

        # Still heading DOWN into its own body, and the shield is spent
        engine.tick(150)
        assert engine.phase == OVER

    def test_shield_pickup_sets_flag(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, [(10, 10)])
        engine.state.power_up = PowerUp((11, 10), SHIELD)

        engine.tick(150)

        assert engine.snapshot().shield_active is True

    def test_active_power_up_is_never_replaced(self, make_engine, set_board):
        engine = make_engine(power_up_probability=1.0)
        set_board(engine, [(10, 10)], food=(11, 10))
        existing = PowerUp((2, 2), SHIELD)
        engine.state.power_up = existing

        engine.tick(150)

        assert engine.snapshot().power_up == existing

    def test_spawned_power_up_avoids_snake_and_food(self, make_engine, set_board):
        engine = make_engine(power_up_probability=1.0)
        set_board(engine, [(10, 10), (9, 10), (8, 10)], food=(11, 10))

        engine.tick(150)

        snapshot = engine.snapshot()
        assert snapshot.power_up is not None
        assert snapshot.power_up.position not in snapshot.snake
        assert snapshot.power_up.position != snapshot.food
        assert is_interior(snapshot.power_up.position, snapshot.grid_size)


class TestPhases:
    def test_pause_freezes_but_buffers_input(self, make_engine):
        engine = make_engine()
        assert engine.pause() is True

        engine.submit_input("ArrowUp")
        assert engine.tick(1000) is False
        assert engine.state.clock_ms == 0
        assert engine.snapshot().pending_direction == UP
        assert engine.snapshot().phase == PAUSED

        assert engine.resume() is True
        engine.tick(150)
        assert engine.snapshot().head == (10, 9)

    def test_pause_and_restart_keys(self, make_engine, set_board):
        engine = make_engine()

        assert engine.submit_input(" ") is True
        assert engine.phase == PAUSED
        assert engine.submit_input("p") is True
        assert engine.phase == RUNNING
        # Restart only applies once the game is over
        assert engine.submit_input("Enter") is False

        set_board(engine, CURLED_SNAKE, direction=LEFT)
        engine.change_direction(DOWN)
        engine.tick(150)
        assert engine.submit_input("r") is True
        assert engine.phase == RUNNING
        assert engine.snapshot().snake == ((10, 10),)

    def test_restart_keeps_only_high_score(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, [(3, 3), (2, 3)], food=(4, 3))
        engine.scoreboard.score = engine.state.score = 5
        engine.tick(150)

        snapshot = engine.restart()

        assert snapshot.score == 0
        assert snapshot.high_score == 6
        assert snapshot.snake == ((10, 10),)
        assert snapshot.speed_ms == 150
        assert snapshot.grid_size == 20
        assert snapshot.phase == RUNNING

    def test_full_board_is_won(self, make_engine, set_board):
        engine = make_engine()
        set_board(engine, [(10, 10)], food=(11, 10))
        engine.spawner.place_food = Mock(return_value=None)

        engine.tick(150)

        snapshot = engine.snapshot()
        assert snapshot.phase == WON
        assert snapshot.food is None
        assert snapshot.high_score == 1
        assert engine.tick(1000) is False

    def test_grid_growth_retries_food_placement(self, make_engine, set_board):
        """A board that grows on the same step gets another chance at placing food."""
        engine = make_engine()
        set_board(engine, [(10, 10)], food=(11, 10))
        engine.scoreboard.score = engine.state.score = 5
        engine.spawner.place_food = Mock(side_effect=[None, (3, 3)])

        engine.tick(150)

        snapshot = engine.snapshot()
        assert snapshot.phase == RUNNING
        assert snapshot.grid_size == 22
        assert snapshot.food == (3, 3)
