"""
Food and power-up placement.
"""

import logging
import random
from typing import Collection, Optional, Tuple

from ..domain.constants import MULTIPLIER, POWER_UP_KINDS
from ..domain.game_state import PowerUp
from ..domain.geometry import interior_cells

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


class Spawner:
    """
    Places food and power-ups on free cells of the interior band.

    Sampling is bounded: after max_attempts random draws the spawner scans
    the band for free cells and picks one of those, so a crowded board can
    never stall a tick.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: int = 200,
        power_up_probability: float = 0.2,
        multiplier_duration_ms: Optional[int] = None,
    ):
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.power_up_probability = power_up_probability
        self.multiplier_duration_ms = multiplier_duration_ms

    def _random_interior_cell(self, grid_size: int) -> Coordinate:
        return (
            self.rng.randint(1, grid_size - 2),
            self.rng.randint(1, grid_size - 2),
        )

    def random_free_cell(self, occupied: Collection[Coordinate], grid_size: int) -> Optional[Coordinate]:
        """
        Return a random interior cell not in ``occupied``, or None when the
        interior band is full.
        """
        if grid_size < 3:
            return None

        for _ in range(self.max_attempts):
            cell = self._random_interior_cell(grid_size)
            if cell not in occupied:
                return cell

        free = [cell for cell in interior_cells(grid_size) if cell not in occupied]
        logger.debug(f"Random placement gave up after {self.max_attempts} attempts; {len(free)} free cells left")
        if not free:
            return None
        return self.rng.choice(free)

    def place_food(self, occupied: Collection[Coordinate], grid_size: int) -> Optional[Coordinate]:
        return self.random_free_cell(occupied, grid_size)

    def maybe_spawn_power_up(
        self,
        grid_size: int,
        occupied: Collection[Coordinate] = (),
    ) -> Optional[PowerUp]:
        """
        Roll for a power-up after food is eaten.

        Returns:
            A PowerUp of a uniformly random kind on a free interior cell, or
            None when the roll fails or there is no room.
        """
        if self.rng.random() >= self.power_up_probability:
            return None

        kind = self.rng.choice(POWER_UP_KINDS)
        position = self.random_free_cell(occupied, grid_size)
        if position is None:
            return None

        duration = self.multiplier_duration_ms if kind == MULTIPLIER else None
        return PowerUp(position=position, kind=kind, duration_ms=duration)
