"""
Grid geometry helpers: wrap-around movement and the interior spawn band.
"""

from typing import Iterator, Tuple

from .constants import DELTAS

Coordinate = Tuple[int, int]


def advance(position: Coordinate, direction: str, grid_size: int) -> Coordinate:
    """
    Move one cell in ``direction``, wrapping around both axes.

    The board is a torus, so every result lands inside ``[0, grid_size)``.
    """
    dx, dy = DELTAS[direction]
    x, y = position
    return ((x + dx + grid_size) % grid_size, (y + dy + grid_size) % grid_size)


def is_within_bounds(position: Coordinate, grid_size: int) -> bool:
    x, y = position
    return 0 <= x < grid_size and 0 <= y < grid_size


def is_interior(position: Coordinate, grid_size: int) -> bool:
    """True when the cell is inside the spawn band (outermost ring excluded)."""
    x, y = position
    return 1 <= x <= grid_size - 2 and 1 <= y <= grid_size - 2


def interior_cells(grid_size: int) -> Iterator[Coordinate]:
    for y in range(1, grid_size - 1):
        for x in range(1, grid_size - 1):
            yield (x, y)


def wrapped_distance(a: Coordinate, b: Coordinate, grid_size: int) -> int:
    """Manhattan distance on the torus."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return min(dx, grid_size - dx) + min(dy, grid_size - dy)
