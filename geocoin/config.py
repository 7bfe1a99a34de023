"""Game configuration with sensible defaults."""

from __future__ import annotations

import math
from dataclasses import dataclass

from geocoin.core.errors import ConfigurationError
from geocoin.core.models import LatLng


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _is_number(value: object) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, float))


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for a game session."""

    # Grid
    tile_degrees: float = 1e-4
    neighborhood_size: int = 8           # Visibility radius in tiles

    # Caches
    cache_spawn_probability: float = 0.1
    max_coins_per_cache: int = 3
    randomize_coin_count: bool = False   # Roll 0..max coins per cache instead of a fixed count

    # Player start (Oakes College classroom)
    start_lat: float = 36.98949379578401
    start_lng: float = -122.06277128548504

    # Logging
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not _is_number(self.tile_degrees) or not math.isfinite(self.tile_degrees) or self.tile_degrees <= 0:
            raise ConfigurationError("tile_degrees", f"must be a positive finite number, got {self.tile_degrees!r}")
        if isinstance(self.neighborhood_size, bool) or not isinstance(self.neighborhood_size, int) or self.neighborhood_size < 0:
            raise ConfigurationError("neighborhood_size", f"must be a non-negative integer, got {self.neighborhood_size!r}")
        if not _is_number(self.cache_spawn_probability) or not 0.0 <= self.cache_spawn_probability <= 1.0:
            raise ConfigurationError(
                "cache_spawn_probability", f"must be within [0, 1], got {self.cache_spawn_probability!r}",
            )
        if isinstance(self.max_coins_per_cache, bool) or not isinstance(self.max_coins_per_cache, int) or self.max_coins_per_cache < 1:
            raise ConfigurationError(
                "max_coins_per_cache", f"must be a positive integer, got {self.max_coins_per_cache!r}",
            )
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigurationError("log_level", f"must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}")

    @property
    def start_point(self) -> LatLng:
        return LatLng(self.start_lat, self.start_lng)
