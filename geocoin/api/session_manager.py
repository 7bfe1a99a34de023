"""SessionManager — serializes API access to the single GameSession.

FastAPI runs sync endpoints on a threadpool; the session itself is not
thread-safe, so every call goes through one lock.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from geocoin.session import GameSession

if TYPE_CHECKING:
    from geocoin.config import GameConfig

logger = logging.getLogger(__name__)


class SessionManager:
    """Owns the live GameSession and rebuilds it on reset."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._session = GameSession(config)

    @contextmanager
    def session(self) -> Iterator[GameSession]:
        """Hold the session lock for the duration of the ``with`` block."""
        with self._lock:
            yield self._session

    def start(self) -> None:
        with self._lock:
            count = len(self._session.spawn_nearby())
        logger.info("Spawned %d cache(s) around the start point.", count)

    def reset(self) -> None:
        """Replace the session with a freshly spawned one in a single locked step."""
        session = GameSession(self.config)
        with self._lock:
            count = len(session.spawn_nearby())
            self._session = session
        logger.info("Session reset; spawned %d cache(s).", count)
