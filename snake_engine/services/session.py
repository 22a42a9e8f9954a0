"""
Thread-safe wrapper around a single GameEngine.

The engine itself is single-threaded. Hosts that call it from more than
one thread (the Flask app, a background Ticker) go through a GameSession
so every entry point runs under one lock and readers never observe a
half-applied tick.
"""

import threading
from typing import Optional, Tuple

from ..config import EngineConfig
from ..domain.game_state import GameSnapshot
from ..engine.game_engine import GameEngine


class GameSession:
    def __init__(self, engine: Optional[GameEngine] = None, config: Optional[EngineConfig] = None):
        self.engine = engine or GameEngine(config)
        self._lock = threading.Lock()

    @property
    def config(self) -> EngineConfig:
        return self.engine.config

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return self.engine.snapshot()

    def tick(self, elapsed_ms: float) -> Tuple[bool, GameSnapshot]:
        with self._lock:
            stepped = self.engine.tick(elapsed_ms)
            return stepped, self.engine.snapshot()

    def submit_input(self, raw_key) -> GameSnapshot:
        with self._lock:
            self.engine.submit_input(raw_key)
            return self.engine.snapshot()

    def change_direction(self, direction: str) -> GameSnapshot:
        with self._lock:
            self.engine.change_direction(direction)
            return self.engine.snapshot()

    def pause(self) -> GameSnapshot:
        with self._lock:
            self.engine.pause()
            return self.engine.snapshot()

    def resume(self) -> GameSnapshot:
        with self._lock:
            self.engine.resume()
            return self.engine.snapshot()

    def toggle_pause(self) -> GameSnapshot:
        with self._lock:
            self.engine.toggle_pause()
            return self.engine.snapshot()

    def restart(self) -> GameSnapshot:
        with self._lock:
            return self.engine.restart()
