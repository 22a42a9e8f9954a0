"""
snake-engine: a deterministic, tick-driven Snake simulation.

The engine advances the snake, resolves collisions, spawns food and
power-ups, keeps score and escalates difficulty. Rendering is left to the
caller, which feeds input in and reads a GameSnapshot out each frame.
"""

from .config import EngineConfig
from .domain import GameSnapshot, PowerUp
from .engine import GameEngine

__version__ = "0.1.0"

__all__ = [
    'EngineConfig',
    'GameEngine',
    'GameSnapshot',
    'PowerUp',
    '__version__',
]
