"""Core data models and the grid canonicalizer."""

from geocoin.core.board import Board
from geocoin.core.cache import Cache, CoinMint, PlayerInventory, collect, deposit
from geocoin.core.enums import CacheState, TransferKind
from geocoin.core.errors import CacheNotFound, ConfigurationError, GeocoinError, InvariantViolation
from geocoin.core.models import Bounds, Cell, Coin, LatLng, cell_key

__all__ = [
    "Board",
    "Bounds",
    "Cache",
    "CacheNotFound",
    "CacheState",
    "Cell",
    "Coin",
    "CoinMint",
    "ConfigurationError",
    "GeocoinError",
    "InvariantViolation",
    "LatLng",
    "PlayerInventory",
    "TransferKind",
    "cell_key",
    "collect",
    "deposit",
]
