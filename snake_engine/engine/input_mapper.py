"""
Maps raw key events to validated directions.
"""

import logging
from collections import deque
from typing import Deque, Optional

from ..domain.constants import DOWN, LEFT, OPPOSITES, RIGHT, UP, VALID_MOVES

logger = logging.getLogger(__name__)

# Raw key identifiers -> direction. Lookups are case-insensitive.
KEY_BINDINGS = {
    "arrowup": UP,
    "arrowdown": DOWN,
    "arrowleft": LEFT,
    "arrowright": RIGHT,
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}

PAUSE_KEYS = {" ", "space", "escape", "p"}
RESTART_KEYS = {"enter", "r"}


def normalize_key(raw_key) -> Optional[str]:
    """Lower-case a raw key identifier; non-strings normalise to None."""
    if not isinstance(raw_key, str) or raw_key == "":
        return None
    # " " is the space bar and must survive the strip
    return raw_key.lower() if raw_key.strip() == "" else raw_key.strip().lower()


def key_to_direction(raw_key) -> Optional[str]:
    key = normalize_key(raw_key)
    if key is None:
        return None
    return KEY_BINDINGS.get(key)


def is_pause_key(raw_key) -> bool:
    return normalize_key(raw_key) in PAUSE_KEYS


def is_restart_key(raw_key) -> bool:
    return normalize_key(raw_key) in RESTART_KEYS


class InputMapper:
    """
    Buffers direction changes between ticks.

    With queue_size=1 the newest valid input overwrites the pending one
    (last writer wins). Larger sizes keep a short queue of turns, one
    consumed per tick. Every entry is checked against the direction the
    snake will be travelling in when it is applied, so no entry can
    reverse the snake onto itself.
    """

    def __init__(self, current_direction: str = RIGHT, queue_size: int = 1):
        if current_direction not in VALID_MOVES:
            raise ValueError(f"Invalid direction '{current_direction}'")
        if queue_size < 1:
            raise ValueError(f"queue_size must be at least 1, got {queue_size}")
        self.current_direction = current_direction
        self.queue_size = queue_size
        self._queue: Deque[str] = deque()

    @property
    def pending(self) -> Optional[str]:
        return self._queue[0] if self._queue else None

    def __len__(self) -> int:
        return len(self._queue)

    def submit(self, raw_key) -> bool:
        """
        Map a raw key and buffer it. Unknown keys are ignored.

        Returns:
            True if the pending input changed
        """
        direction = key_to_direction(raw_key)
        if direction is None:
            logger.debug(f"Ignoring unmapped key {raw_key!r}")
            return False
        return self.submit_direction(direction)

    def submit_direction(self, direction: str) -> bool:
        if direction not in VALID_MOVES:
            logger.debug(f"Ignoring invalid direction {direction!r}")
            return False

        if len(self._queue) < self.queue_size:
            reference = self._queue[-1] if self._queue else self.current_direction
            if direction == reference or direction == OPPOSITES[reference]:
                return False
            self._queue.append(direction)
            return True

        # Queue is full: the newest input replaces the last slot, validated
        # against whatever precedes that slot.
        reference = self._queue[-2] if len(self._queue) > 1 else self.current_direction
        if direction == OPPOSITES[reference] or direction == self._queue[-1]:
            return False
        if direction == reference:
            # Turning back to the reference direction cancels the last turn
            self._queue.pop()
            return True
        self._queue[-1] = direction
        return True

    def consume_pending(self) -> Optional[str]:
        """Pop the next direction, making it the current one."""
        if not self._queue:
            return None
        self.current_direction = self._queue.popleft()
        return self.current_direction

    def reset(self, direction: str = RIGHT) -> None:
        self._queue.clear()
        self.current_direction = direction
