"""GameSession — wires board, spawn policy, registry and player inventory together."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geocoin.core.board import Board
from geocoin.core.cache import Cache, CoinMint, PlayerInventory, collect, deposit
from geocoin.core.enums import TransferKind
from geocoin.core.errors import CacheNotFound
from geocoin.core.models import Coin, LatLng
from geocoin.systems.registry import CacheRegistry
from geocoin.systems.rng import DeterministicRNG
from geocoin.systems.spawn import SpawnPolicy
from geocoin.utils.event_log import EventLog

if TYPE_CHECKING:
    from geocoin.config import GameConfig

logger = logging.getLogger(__name__)


class GameSession:
    """One play session: a single player inventory and the caches spawned so far.

    All methods run synchronously to completion; callers on several threads
    must serialize access themselves (see ``SessionManager``).
    """

    def __init__(self, config: GameConfig, rng: DeterministicRNG | None = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else DeterministicRNG()
        self.board = Board(config.tile_degrees, config.neighborhood_size)
        self.mint = CoinMint()
        self.policy = SpawnPolicy(
            self.rng,
            self.mint,
            spawn_probability=config.cache_spawn_probability,
            max_coins=config.max_coins_per_cache,
            randomize_coin_count=config.randomize_coin_count,
        )
        self.registry = CacheRegistry(self.policy, on_create=self._on_cache_created)
        self.inventory = PlayerInventory()
        self.events = EventLog()
        self.player_point: LatLng = config.start_point
        logger.info(
            "Game session ready (tile=%g deg, radius=%d, spawn_p=%.2f, max_coins=%d)",
            config.tile_degrees, config.neighborhood_size,
            config.cache_spawn_probability, config.max_coins_per_cache,
        )

    # -- world --

    def spawn_nearby(self, point: LatLng | None = None) -> list[Cache]:
        """Spawn (or fetch) every cache within the visibility radius of *point*.

        *point* defaults to the player's position.
        """
        if point is None:
            point = self.player_point
        caches: list[Cache] = []
        for cell in self.board.neighborhood(point):
            cache = self.registry.get_or_create(cell)
            if cache is not None:
                caches.append(cache)
        return caches

    def cache_at(self, i: int, j: int) -> Cache | None:
        """Return the already-spawned cache at ``(i, j)``, or None."""
        return self.registry.get(self.board.canonicalize(i, j))

    # -- transfers --

    def collect(self, i: int, j: int) -> Coin | None:
        return self._transfer(TransferKind.COLLECT, i, j)

    def deposit(self, i: int, j: int) -> Coin | None:
        return self._transfer(TransferKind.DEPOSIT, i, j)

    def _transfer(self, kind: TransferKind, i: int, j: int) -> Coin | None:
        cache = self.cache_at(i, j)
        if cache is None:
            raise CacheNotFound(i, j)

        if kind == TransferKind.COLLECT:
            coin = collect(cache, self.inventory)
        else:
            coin = deposit(cache, self.inventory)

        if coin is not None:
            verb = "Collected" if kind == TransferKind.COLLECT else "Deposited"
            self.events.record(
                kind.name.lower(),
                f"{verb} coin {coin.serial} at ({i}, {j})",
                cell=(cache.cell.i, cache.cell.j),
            )
        return coin

    # -- bookkeeping --

    def total_coins(self) -> int:
        """Coins held by the player plus coins in every cache."""
        return len(self.inventory) + self.registry.total_coins()

    def _on_cache_created(self, cache: Cache) -> None:
        cell = cache.cell
        self.events.record(
            "spawn",
            f"Cache at ({cell.i}, {cell.j}) with {len(cache)} coin(s)",
            cell=(cell.i, cell.j),
        )
