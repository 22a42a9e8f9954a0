"""
Player implementations for the snake engine.

Players are automated input sources: they read a snapshot and propose the
next direction. The CLI and drivers use them for headless runs.
"""

from .base import Player, safe_moves
from .greedy_player import GreedyPlayer
from .random_player import RandomPlayer
from .variant_registry import AVAILABLE_VARIANTS, get_player_class, list_variants

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'safe_moves',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
