"""Keyed deterministic randomness using xxhash.

Every roll is a pure function of a key string: the same key always yields
the same value, so world generation does not depend on the order in which
cells are visited.
"""

from __future__ import annotations

from typing import Callable

import xxhash

_UINT64_SPAN = 1 << 64


def luck(key: str) -> float:
    """Return a deterministic float in [0.0, 1.0) for *key*."""
    return xxhash.xxh64(key.encode("utf-8")).intdigest() / _UINT64_SPAN


class DeterministicRNG:
    """Stateless pseudo-random number generator over a keyed source.

    *source* is any pure ``str -> float in [0, 1)`` function; it defaults to
    :func:`luck`. Tests swap in table-driven sources.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Callable[[str], float] = luck) -> None:
        self._source = source

    def next_float(self, key: str) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._source(key)

    def next_int(self, key: str, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(key)
        return low + int(f * (high - low + 1))

    def next_bool(self, key: str, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.next_float(key) < probability
