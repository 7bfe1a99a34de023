"""Thread-safe log of game events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single game event for the API event feed."""

    seq: int
    category: str              # "spawn" | "collect" | "deposit"
    message: str
    cell: tuple[int, int] | None = None


class EventLog:
    """Append-only event log. Writers append; readers copy a slice.

    Events are kept until ``clear()``. A lock guards the buffer because the
    API reads it from request threads.
    """

    __slots__ = ("_buffer", "_lock", "_next_seq")

    def __init__(self) -> None:
        self._buffer: deque[GameEvent] = deque()
        self._lock = threading.Lock()
        self._next_seq = 1

    def record(self, category: str, message: str, cell: tuple[int, int] | None = None) -> GameEvent:
        """Append a new event with the next sequence number and return it."""
        with self._lock:
            event = GameEvent(self._next_seq, category, message, cell)
            self._next_seq += 1
            self._buffer.append(event)
        return event

    def since(self, seq: int) -> list[GameEvent]:
        """Return all events with seq >= *seq*."""
        with self._lock:
            return [e for e in self._buffer if e.seq >= seq]

    def latest(self, count: int = 50) -> list[GameEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:] if count > 0 else []

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
            self._next_seq = 1
