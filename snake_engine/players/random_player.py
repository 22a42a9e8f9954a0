"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Optional

from ..domain.constants import OPPOSITES
from ..domain.game_state import GameSnapshot
from .base import MOVE_ORDER, Player, safe_moves


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids reversing and self-collisions.
    """

    name = "random"

    def get_move(self, snapshot: GameSnapshot) -> Optional[str]:
        valid_moves = safe_moves(snapshot)

        # If no valid moves, just return any non-reversing move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(
                [m for m in MOVE_ORDER if m != OPPOSITES[snapshot.direction]]
            )

        return self.rng.choice(valid_moves)
