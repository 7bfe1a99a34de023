"""Enumerations used throughout the game core."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class CacheState(IntEnum):
    """The two observable states of a cache."""

    EMPTY = 0
    HAS_COINS = 1


@unique
class TransferKind(IntEnum):
    """Direction of a coin transfer between a cache and the player."""

    COLLECT = 0   # cache -> player
    DEPOSIT = 1   # player -> cache
