"""
GameState entity and the read-only snapshot handed to renderers.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .constants import MULTIPLIER, RUNNING, SHIELD, SPEED, START_DIRECTION
from .snake import Snake

Coordinate = Tuple[int, int]

POWER_UP_SYMBOLS = {
    SPEED: "S",
    MULTIPLIER: "M",
    SHIELD: "X",
}


def _cell_dict(cell: Optional[Coordinate]) -> Optional[Dict[str, int]]:
    if cell is None:
        return None
    return {"x": cell[0], "y": cell[1]}


@dataclass(frozen=True)
class PowerUp:
    """
    A power-up sitting on the board.

    Attributes:
        position: (x, y) cell of the power-up
        kind: one of SPEED, MULTIPLIER, SHIELD
        duration_ms: effect duration once picked up (None for instant or
            until-consumed effects)
    """

    position: Coordinate
    kind: str
    duration_ms: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.position[0],
            "y": self.position[1],
            "kind": self.kind,
            "duration_ms": self.duration_ms,
        }


@dataclass
class GameState:
    """
    The canonical mutable game record. Only GameEngine writes to it.

    clock_ms is simulated running time (paused time is not counted) and
    multiplier_expiry_ms is a deadline on that clock.
    """

    snake: Snake
    food: Optional[Coordinate]
    grid_size: int
    speed_ms: int
    base_speed_ms: int
    difficulty: str
    power_up: Optional[PowerUp] = None
    direction: str = START_DIRECTION
    pending_direction: Optional[str] = None
    score: int = 0
    high_score: int = 0
    score_multiplier: int = 1
    multiplier_expiry_ms: Optional[float] = None
    shield_active: bool = False
    phase: str = RUNNING
    clock_ms: float = 0
    since_last_step_ms: float = 0
    steps: int = 0

    def snapshot(self) -> "GameSnapshot":
        return GameSnapshot(
            snake=tuple(self.snake.positions),
            food=self.food,
            power_up=self.power_up,
            direction=self.direction,
            pending_direction=self.pending_direction,
            score=self.score,
            high_score=self.high_score,
            speed_ms=self.speed_ms,
            speed_level=self.base_speed_ms - self.speed_ms,
            grid_size=self.grid_size,
            score_multiplier=self.score_multiplier,
            shield_active=self.shield_active,
            phase=self.phase,
            difficulty=self.difficulty,
            steps=self.steps,
        )


@dataclass(frozen=True)
class GameSnapshot:
    """
    An immutable view of the game at a specific point in time.

    Presentation code reads one of these per frame; it never sees a
    partially applied tick.
    """

    snake: Tuple[Coordinate, ...]
    food: Optional[Coordinate]
    power_up: Optional[PowerUp]
    direction: str
    pending_direction: Optional[str]
    score: int
    high_score: int
    speed_ms: int
    speed_level: int
    grid_size: int
    score_multiplier: int
    shield_active: bool
    phase: str
    difficulty: str
    steps: int = 0

    @property
    def head(self) -> Coordinate:
        return self.snake[0]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the snapshot to a dictionary for JSON serialization."""
        return {
            "snake": [_cell_dict(cell) for cell in self.snake],
            "food": _cell_dict(self.food),
            "power_up": self.power_up.to_dict() if self.power_up else None,
            "direction": self.direction,
            "pending_direction": self.pending_direction,
            "score": self.score,
            "high_score": self.high_score,
            "speed_ms": self.speed_ms,
            "speed_level": self.speed_level,
            "grid_size": self.grid_size,
            "score_multiplier": self.score_multiplier,
            "shield_active": self.shield_active,
            "phase": self.phase,
            "difficulty": self.difficulty,
            "steps": self.steps,
        }

    def render_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S, M, X = speed, multiplier, shield power-up
        H = snake head
        o = snake body
        Row 0 is printed first, matching the screen orientation.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        if self.power_up is not None:
            px, py = self.power_up.position
            board[py][px] = POWER_UP_SYMBOLS.get(self.power_up.kind, '?')

        for idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if idx == 0 else 'o'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameSnapshot phase={self.phase}, head={self.head}, length={len(self.snake)}, "
            f"food={self.food}, score={self.score}>"
        )
