"""
Domain entities for the snake engine.

This module contains the core game entities that are independent of
drivers, HTTP and command-line concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITES,
    RUNNING, PAUSED, OVER, WON, TERMINAL_PHASES,
    SPEED, MULTIPLIER, SHIELD, POWER_UP_KINDS,
    EASY, MEDIUM, HARD, DIFFICULTY_SETTINGS,
)
from .snake import Snake
from .game_state import GameState, GameSnapshot, PowerUp

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITES',
    'RUNNING', 'PAUSED', 'OVER', 'WON', 'TERMINAL_PHASES',
    'SPEED', 'MULTIPLIER', 'SHIELD', 'POWER_UP_KINDS',
    'EASY', 'MEDIUM', 'HARD', 'DIFFICULTY_SETTINGS',
    'Snake',
    'GameState',
    'GameSnapshot',
    'PowerUp',
]
