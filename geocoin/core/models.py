"""Core value types: LatLng, Bounds, Cell, Coin."""

from __future__ import annotations

from dataclasses import dataclass


def cell_key(i: int, j: int) -> str:
    """Canonical registry key for grid position ``(i, j)``, e.g. ``"3,-4"``.

    Every lookup table keyed by cell (board, cache registry, spawn rolls)
    goes through this function so equal coordinates never produce two keys.
    """
    return f"{int(i)},{int(j)}"


@dataclass(frozen=True, slots=True)
class LatLng:
    """Geographic point in degrees."""

    lat: float
    lng: float

    def __repr__(self) -> str:
        return f"LatLng({self.lat}, {self.lng})"


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned lat/lng rectangle."""

    south_west: LatLng
    north_east: LatLng

    @property
    def center(self) -> LatLng:
        return LatLng(
            (self.south_west.lat + self.north_east.lat) / 2,
            (self.south_west.lng + self.north_east.lng) / 2,
        )


@dataclass(frozen=True, slots=True)
class Cell:
    """Immutable quantized grid position.

    Obtain cells through ``Board`` so that equal coordinates share one instance.
    """

    i: int
    j: int

    @property
    def key(self) -> str:
        return cell_key(self.i, self.j)

    def __repr__(self) -> str:
        return f"Cell({self.i}, {self.j})"


@dataclass(frozen=True, slots=True)
class Coin:
    """Immutable token. ``i``/``j`` record the cell the coin was minted in."""

    serial: str
    i: int
    j: int

    @property
    def origin(self) -> tuple[int, int]:
        return self.i, self.j

    def __str__(self) -> str:
        return f"[i: {self.i}, j: {self.j}] serial: {self.serial}"
