"""
Base player interface for the game engine.
"""

import random
from typing import List, Optional

from ..domain.constants import DOWN, LEFT, OPPOSITES, RIGHT, UP
from ..domain.game_state import GameSnapshot
from ..domain.geometry import advance

MOVE_ORDER = (UP, DOWN, LEFT, RIGHT)


def safe_moves(snapshot: GameSnapshot) -> List[str]:
    """
    Directions that neither reverse the snake nor land on its current body.

    The engine checks the new head against every pre-move segment
    (tail included), so the tail is not treated as free here either.
    """
    body = set(snapshot.snake)
    moves = []
    for move in MOVE_ORDER:
        if move == OPPOSITES[snapshot.direction]:
            continue
        if advance(snapshot.head, move, snapshot.grid_size) in body:
            continue
        moves.append(move)
    return moves


class Player:
    """
    Base class/interface for automated input.

    A player looks at the latest snapshot and proposes the next direction;
    the driver feeds that into the engine like any other key press.
    """

    name = "base"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, snapshot: GameSnapshot) -> Optional[str]:
        """
        Return a move direction given the current snapshot.

        Args:
            snapshot: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", or None to keep going straight
        """
        raise NotImplementedError
