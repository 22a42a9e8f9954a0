"""
Real-time driver for a GameSession.

The Ticker plays the role the browser's animation loop plays for the
web client: it measures wall-clock time between frames, hands the
elapsed milliseconds to the engine and waits for the next frame.
"""

import logging
import threading
import time
from typing import Callable, Optional

from ..domain.constants import TERMINAL_PHASES
from ..domain.game_state import GameSnapshot
from ..players.base import Player
from .session import GameSession

logger = logging.getLogger(__name__)


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Ticker:
    """
    Calls session.tick() once per frame until stopped.

    Args:
        session: the session to drive
        frame_ms: wait between frames
        clock: returns the current time in milliseconds (monotonic)
        player: optional autoplayer asked for a move after every applied step
        on_frame: called with the snapshot after every applied step
        stop_when_finished: leave the loop once the game reaches OVER or WON
    """

    def __init__(
        self,
        session: GameSession,
        frame_ms: float = 16.0,
        clock: Callable[[], float] = monotonic_ms,
        player: Optional[Player] = None,
        on_frame: Optional[Callable[[GameSnapshot], None]] = None,
        stop_when_finished: bool = True,
    ):
        self.session = session
        self.frame_ms = frame_ms
        self.clock = clock
        self.player = player
        self.on_frame = on_frame
        self.stop_when_finished = stop_when_finished
        self.steps = 0
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _ask_player(self) -> None:
        if self.player is None:
            return
        move = self.player.get_move(self.session.snapshot())
        if move is not None:
            self.session.change_direction(move)

    def run(self, max_frames: Optional[int] = None) -> int:
        """
        Drive the session in the calling thread.

        Returns:
            The number of simulation steps applied
        """
        # start() clears the event before launching the thread
        if threading.current_thread() is not self._thread:
            self._stop.clear()
        frames = 0
        last = self.clock()
        self._ask_player()
        logger.info(f"Ticker started (frame every {self.frame_ms}ms)")

        while not self._stop.is_set():
            if max_frames is not None and frames >= max_frames:
                break

            now = self.clock()
            elapsed = now - last
            last = now

            stepped, snapshot = self.session.tick(elapsed)
            frames += 1
            if stepped:
                self.steps += 1
                if self.on_frame is not None:
                    self.on_frame(snapshot)
                if self.stop_when_finished and snapshot.phase in TERMINAL_PHASES:
                    break
                self._ask_player()

            # Event.wait doubles as the frame sleep; stop() cancels the next tick
            if self._stop.wait(self.frame_ms / 1000.0):
                break

        logger.info(f"Ticker stopped after {frames} frames and {self.steps} steps")
        return self.steps

    def start(self) -> None:
        """Run the loop in a daemon thread."""
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self.run, name="snake-ticker", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)
