"""
Collision checks. All of them are exact coordinate comparisons.
"""

from typing import Iterable, Optional, Tuple

from ..domain.game_state import PowerUp

Coordinate = Tuple[int, int]


def check_self_collision(snake_before_move: Iterable[Coordinate], new_head: Coordinate) -> bool:
    """True if the new head lands on any segment of the pre-move snake."""
    return new_head in snake_before_move


def check_food_pickup(new_head: Coordinate, food: Optional[Coordinate]) -> bool:
    return food is not None and new_head == food


def check_power_up_pickup(new_head: Coordinate, power_up: Optional[PowerUp]) -> bool:
    return power_up is not None and new_head == power_up.position
