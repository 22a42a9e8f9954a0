"""
Simulation components: input buffering, spawning, collisions, scoring,
difficulty escalation and the GameEngine that ties them together.
"""

from .collision import check_food_pickup, check_power_up_pickup, check_self_collision
from .difficulty import DifficultyController
from .game_engine import GameEngine
from .input_mapper import InputMapper, KEY_BINDINGS, PAUSE_KEYS, RESTART_KEYS
from .scoreboard import Scoreboard
from .spawner import Spawner

__all__ = [
    'GameEngine',
    'InputMapper',
    'KEY_BINDINGS',
    'PAUSE_KEYS',
    'RESTART_KEYS',
    'Spawner',
    'DifficultyController',
    'Scoreboard',
    'check_self_collision',
    'check_food_pickup',
    'check_power_up_pickup',
]
