"""
Drivers and hosting helpers for the engine.
"""

from .session import GameSession
from .simulation import play_game, run_simulation, summarize
from .ticker import Ticker

__all__ = [
    'GameSession',
    'Ticker',
    'play_game',
    'run_simulation',
    'summarize',
]
