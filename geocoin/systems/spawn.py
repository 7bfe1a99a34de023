"""Spawn policy — decides which cells host a cache and what it starts with."""

from __future__ import annotations

from typing import TYPE_CHECKING

from geocoin.core.errors import ConfigurationError

if TYPE_CHECKING:
    from geocoin.core.cache import CoinMint
    from geocoin.core.models import Cell, Coin
    from geocoin.systems.rng import DeterministicRNG


class SpawnPolicy:
    """Per-cell, order-independent cache placement.

    The spawn roll is keyed by the cell key alone (``"i,j"``); the coin-count
    roll, when enabled, by ``"i,j,initialValue"`` so the two are uncorrelated.
    """

    __slots__ = ("_rng", "_mint", "spawn_probability", "max_coins", "randomize_coin_count")

    def __init__(
        self,
        rng: DeterministicRNG,
        mint: CoinMint,
        spawn_probability: float,
        max_coins: int,
        randomize_coin_count: bool = False,
    ) -> None:
        if not 0.0 <= spawn_probability <= 1.0:
            raise ConfigurationError("spawn_probability", f"must be within [0, 1], got {spawn_probability!r}")
        _check_max_coins(max_coins)
        self._rng = rng
        self._mint = mint
        self.spawn_probability = spawn_probability
        self.max_coins = max_coins
        self.randomize_coin_count = randomize_coin_count

    def should_spawn(self, cell: Cell) -> bool:
        return self._rng.next_bool(cell.key, self.spawn_probability)

    def coin_count(self, cell: Cell, max_coins: int | None = None) -> int:
        if max_coins is None:
            max_coins = self.max_coins
        else:
            _check_max_coins(max_coins)
        if not self.randomize_coin_count:
            return max_coins
        return self._rng.next_int(f"{cell.key},initialValue", 0, max_coins)

    def initial_coins(self, cell: Cell, max_coins: int | None = None) -> list[Coin]:
        """Mint the starting coins of a cache at *cell*."""
        return [self._mint.mint(cell) for _ in range(self.coin_count(cell, max_coins))]


def _check_max_coins(max_coins: int) -> None:
    if isinstance(max_coins, bool) or not isinstance(max_coins, int) or max_coins < 1:
        raise ConfigurationError("max_coins", f"must be a positive integer, got {max_coins!r}")
