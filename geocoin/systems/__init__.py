"""Game systems: keyed RNG, spawn policy, cache registry."""

from geocoin.systems.registry import CacheRegistry
from geocoin.systems.rng import DeterministicRNG, luck
from geocoin.systems.spawn import SpawnPolicy

__all__ = ["CacheRegistry", "DeterministicRNG", "SpawnPolicy", "luck"]
