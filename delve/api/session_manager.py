"""SessionManager — owns the live GameSession behind a lock.

FastAPI runs sync handlers on a thread pool, so every read and every
``advance`` goes through ``locked()``; the session itself stays
single-threaded.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from delve.engine.session import GameSession

if TYPE_CHECKING:
    from delve.config import DungeonConfig

logger = logging.getLogger(__name__)


class SessionManager:
    """Creates, resets and guards the single session served over HTTP."""

    def __init__(self, config: DungeonConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._session: GameSession | None = None
        self._resets: int = 0

    @property
    def resets(self) -> int:
        return self._resets

    def start(self) -> None:
        """Generate the first level if no session exists yet."""
        with self._lock:
            if self._session is None:
                self._session = self._new_session()

    def stop(self) -> None:
        with self._lock:
            self._session = None
        logger.info("Session released.")

    def reset(self, seed: int | None = None) -> None:
        """Throw the current run away and start over, optionally reseeded."""
        with self._lock:
            if seed is not None:
                self.config = dataclasses.replace(self.config, seed=seed)
            self._session = self._new_session()
            self._resets += 1
        logger.info("Session reset (seed=%d)", self.config.seed)

    @contextmanager
    def locked(self) -> Iterator[GameSession | None]:
        """Hold the lock for the duration of a request; yields None before start."""
        with self._lock:
            yield self._session

    def _new_session(self) -> GameSession:
        session = GameSession(self.config)
        session.generate()
        logger.info(
            "New session: seed=%d, %dx%d, %d rooms",
            self.config.seed, self.config.map_width, self.config.map_height, self.config.max_rooms,
        )
        return session
