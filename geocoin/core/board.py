"""Board — quantizes geographic points into canonical grid cells."""

from __future__ import annotations

import logging
import math

from geocoin.core.errors import ConfigurationError
from geocoin.core.models import Bounds, Cell, LatLng, cell_key

logger = logging.getLogger(__name__)


class Board:
    """Lat/lng grid of square tiles, ``tile_width`` degrees on each side.

    Cell ``(0, 0)`` has its south-west corner at ``(-90, -180)``. The board
    keeps one ``Cell`` instance per coordinate pair for its whole lifetime,
    so cells it returns can be compared by identity.
    """

    __slots__ = ("tile_width", "visibility_radius", "_known_cells")

    def __init__(self, tile_width: float, visibility_radius: int = 0) -> None:
        if isinstance(tile_width, bool) or not isinstance(tile_width, (int, float)):
            raise ConfigurationError("tile_width", f"must be a number, got {tile_width!r}")
        if not math.isfinite(tile_width) or tile_width <= 0:
            raise ConfigurationError("tile_width", f"must be a positive finite number, got {tile_width!r}")
        _check_radius("visibility_radius", visibility_radius)

        self.tile_width = float(tile_width)
        self.visibility_radius = visibility_radius
        self._known_cells: dict[str, Cell] = {}

    @property
    def known_cells(self) -> int:
        """Number of canonical cells handed out so far."""
        return len(self._known_cells)

    # -- canonicalization --

    def canonicalize(self, i: int, j: int) -> Cell:
        """Return the single shared ``Cell`` for ``(i, j)``, creating it on first use."""
        key = cell_key(i, j)
        cell = self._known_cells.get(key)
        if cell is None:
            cell = Cell(int(i), int(j))
            self._known_cells[key] = cell
        return cell

    def cell_for_point(self, point: LatLng) -> Cell:
        return self.canonicalize(
            math.floor((point.lat + 90) / self.tile_width),
            math.floor((point.lng + 180) / self.tile_width),
        )

    # -- geometry --

    def bounds_for_cell(self, cell: Cell) -> Bounds:
        w = self.tile_width
        return Bounds(
            south_west=LatLng(-90 + cell.i * w, -180 + cell.j * w),
            north_east=LatLng(-90 + (cell.i + 1) * w, -180 + (cell.j + 1) * w),
        )

    def cell_center(self, cell: Cell) -> LatLng:
        return self.bounds_for_cell(cell).center

    # -- neighborhood --

    def neighborhood(self, point: LatLng, radius: int | None = None) -> list[Cell]:
        """Return every cell within *radius* tiles (Chebyshev) of *point*'s cell.

        Cells come back row-major (``di`` outer, ``dj`` inner) with duplicates
        removed, ``(2 * radius + 1) ** 2`` of them. ``radius`` defaults to the
        board's ``visibility_radius``.
        """
        if radius is None:
            radius = self.visibility_radius
        else:
            _check_radius("radius", radius)

        origin = self.cell_for_point(point)
        seen: set[int] = set()
        result: list[Cell] = []
        for di in range(-radius, radius + 1):
            for dj in range(-radius, radius + 1):
                cell = self.canonicalize(origin.i + di, origin.j + dj)
                if id(cell) in seen:
                    continue
                seen.add(id(cell))
                result.append(cell)

        logger.debug("Neighborhood of %s (r=%d): %d cells", origin, radius, len(result))
        return result


def _check_radius(name: str, radius: int) -> None:
    if isinstance(radius, bool) or not isinstance(radius, int):
        raise ConfigurationError(name, f"must be an integer, got {radius!r}")
    if radius < 0:
        raise ConfigurationError(name, f"must be non-negative, got {radius}")
