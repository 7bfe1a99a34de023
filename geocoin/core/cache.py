"""Caches, the player inventory, coin minting and the collect/deposit transfers.

``collect`` and ``deposit`` are the only code paths that move a coin between
containers. Both containers expose their coins read-only; together with
``CoinMint`` handing out each serial exactly once this keeps every minted
coin in exactly one place.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from geocoin.core.enums import CacheState
from geocoin.core.errors import InvariantViolation
from geocoin.core.models import Cell, Coin

logger = logging.getLogger(__name__)


class CoinStack:
    """Ordered coin container; the last coin pushed is the first popped."""

    __slots__ = ("_coins", "on_change")

    def __init__(self, coins: Iterable[Coin] = (), on_change: Callable[[Any], None] | None = None) -> None:
        self._coins: list[Coin] = list(coins)
        self.on_change = on_change

    @property
    def coins(self) -> tuple[Coin, ...]:
        return tuple(self._coins)

    def __len__(self) -> int:
        return len(self._coins)

    def _pop(self) -> Coin | None:
        return self._coins.pop() if self._coins else None

    def _push(self, coin: Coin) -> None:
        self._coins.append(coin)

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self)


class Cache(CoinStack):
    """Coins stored at one grid cell.

    ``handle`` belongs to whatever renders the cache (a map rectangle, a
    widget id, ...); the core never looks at it.
    """

    __slots__ = ("cell", "handle")

    def __init__(
        self,
        cell: Cell,
        coins: Iterable[Coin] = (),
        handle: Any = None,
        on_change: Callable[[Cache], None] | None = None,
    ) -> None:
        super().__init__(coins, on_change)
        self.cell = cell
        self.handle = handle

    @property
    def state(self) -> CacheState:
        return CacheState.HAS_COINS if self._coins else CacheState.EMPTY

    def describe(self) -> str:
        """Plain-text summary: location, coin count, one line per coin."""
        lines = [
            f"Cache at ({self.cell.i}, {self.cell.j})",
            f"Contains {len(self._coins)} coin(s)",
        ]
        if self._coins:
            lines.append("Coins:")
            lines.extend(f"  {coin}" for coin in self._coins)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Cache({self.cell.i}, {self.cell.j}, coins={len(self._coins)})"


class PlayerInventory(CoinStack):
    """The coins the player is carrying. Starts empty."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"PlayerInventory(coins={len(self._coins)})"


class CoinMint:
    """Issues coins and guarantees no serial is ever issued twice.

    Serials are ``"i:j#n"`` where ``n`` counts the coins minted for that cell
    so far, so the first coins of a cell get the same serials whatever order
    cells are visited in.
    """

    __slots__ = ("_issued", "_next_index")

    def __init__(self) -> None:
        self._issued: set[str] = set()
        self._next_index: dict[str, int] = {}

    @property
    def issued(self) -> int:
        """Total number of coins minted so far."""
        return len(self._issued)

    def mint(self, cell: Cell) -> Coin:
        """Mint the next coin for *cell*."""
        index = self._next_index.get(cell.key, 0)
        self._next_index[cell.key] = index + 1
        serial = f"{cell.i}:{cell.j}#{index}"
        if serial in self._issued:
            raise InvariantViolation(f"Coin serial {serial} minted twice")
        self._issued.add(serial)
        return Coin(serial=serial, i=cell.i, j=cell.j)


# -- transfers --

def collect(cache: Cache, inventory: PlayerInventory) -> Coin | None:
    """Move the most recently added coin from *cache* to *inventory*.

    Returns the coin, or None (and changes nothing) if the cache is empty.
    """
    coin = cache._pop()
    if coin is None:
        return None
    inventory._push(coin)
    logger.debug("Collected %s from %r", coin.serial, cache)
    cache._notify()
    inventory._notify()
    return coin


def deposit(cache: Cache, inventory: PlayerInventory) -> Coin | None:
    """Move the most recently collected coin from *inventory* to *cache*.

    Returns the coin, or None (and changes nothing) if the inventory is empty.
    """
    coin = inventory._pop()
    if coin is None:
        return None
    cache._push(coin)
    logger.debug("Deposited %s into %r", coin.serial, cache)
    cache._notify()
    inventory._notify()
    return coin
