"""Cache registry — at most one cache per cell, created lazily."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping

from geocoin.core.cache import Cache

if TYPE_CHECKING:
    from geocoin.core.models import Cell
    from geocoin.systems.spawn import SpawnPolicy

logger = logging.getLogger(__name__)


class CacheRegistry:
    """Memoizes the caches the spawn policy places, keyed by canonical cell key.

    ``on_create`` runs once per new cache, after the cache is registered, so a
    lookup made from inside the hook already finds it.
    """

    __slots__ = ("_policy", "_caches", "_barren", "on_create")

    def __init__(
        self,
        policy: SpawnPolicy,
        on_create: Callable[[Cache], None] | None = None,
    ) -> None:
        self._policy = policy
        self._caches: dict[str, Cache] = {}
        self._barren: set[str] = set()
        self.on_create = on_create

    @property
    def caches(self) -> Mapping[str, Cache]:
        """Read-only view of every cache created so far, in creation order."""
        return MappingProxyType(self._caches)

    def __len__(self) -> int:
        return len(self._caches)

    def __contains__(self, cell: object) -> bool:
        key = getattr(cell, "key", None)
        return key is not None and key in self._caches

    def get(self, cell: Cell) -> Cache | None:
        """Return the cache at *cell* if one was created; never spawns."""
        return self._caches.get(cell.key)

    def get_or_create(self, cell: Cell) -> Cache | None:
        """Return the cache at *cell*, spawning it if the policy places one there.

        Returns None for cells the policy leaves empty; the answer for a cell
        never changes.
        """
        key = cell.key
        cache = self._caches.get(key)
        if cache is not None:
            return cache
        if key in self._barren:
            return None
        if not self._policy.should_spawn(cell):
            self._barren.add(key)
            return None

        cache = Cache(cell, self._policy.initial_coins(cell))
        self._caches[key] = cache
        logger.debug("Spawned cache at %s with %d coin(s)", cell, len(cache))
        if self.on_create is not None:
            self.on_create(cache)
        return cache

    def total_coins(self) -> int:
        return sum(len(c) for c in self._caches.values())
