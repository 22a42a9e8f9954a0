"""
Greedy player - heads for the food along the shortest wrapped path.
"""

from typing import Optional

from ..domain.game_state import GameSnapshot
from ..domain.geometry import advance, wrapped_distance
from .base import Player, safe_moves


class GreedyPlayer(Player):
    """
    Picks the safe move that brings the head closest to the food, breaking
    ties at random. Falls back to keeping its direction when boxed in.
    """

    name = "greedy"

    def get_move(self, snapshot: GameSnapshot) -> Optional[str]:
        valid_moves = safe_moves(snapshot)
        if not valid_moves:
            return None
        if snapshot.food is None:
            return self.rng.choice(valid_moves)

        def distance(move: str) -> int:
            nxt = advance(snapshot.head, move, snapshot.grid_size)
            return wrapped_distance(nxt, snapshot.food, snapshot.grid_size)

        best = min(distance(m) for m in valid_moves)
        return self.rng.choice([m for m in valid_moves if distance(m) == best])
