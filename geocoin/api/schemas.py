"""Pydantic response models for the REST API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from geocoin.core.board import Board
    from geocoin.core.cache import Cache
    from geocoin.core.models import Cell, Coin
    from geocoin.utils.event_log import GameEvent


# --- Geometry ---

class LatLngSchema(BaseModel):
    lat: float
    lng: float


class BoundsSchema(BaseModel):
    south_west: LatLngSchema
    north_east: LatLngSchema


class CellSchema(BaseModel):
    i: int
    j: int
    bounds: BoundsSchema
    center: LatLngSchema = Field(description="Marker position for the cell")


class CellsResponse(BaseModel):
    origin: CellSchema
    radius: int
    cells: list[CellSchema] = Field(description="Row-major, (2r+1)^2 cells around the origin")


# --- Caches & coins ---

class CoinSchema(BaseModel):
    serial: str
    i: int = Field(description="Row of the cell the coin was minted in")
    j: int = Field(description="Column of the cell the coin was minted in")


class CacheSchema(BaseModel):
    i: int
    j: int
    state: str
    bounds: BoundsSchema
    center: LatLngSchema
    coin_count: int
    coins: list[CoinSchema] = Field(default_factory=list, description="Bottom of the stack first")


class CachesResponse(BaseModel):
    player: LatLngSchema
    count: int
    caches: list[CacheSchema]


class TransferResponse(BaseModel):
    status: str = Field(description="'ok' when a coin moved, 'noop' when the source was empty")
    message: str
    coin: CoinSchema | None = None
    cache_coins: int
    inventory_coins: int


class InventoryResponse(BaseModel):
    count: int
    coins: list[CoinSchema]
    total_coins: int = Field(description="Coins in the inventory plus every spawned cache")
    minted_coins: int


# --- Events ---

class EventSchema(BaseModel):
    seq: int
    category: str
    message: str
    i: int | None = None
    j: int | None = None


class EventsResponse(BaseModel):
    events: list[EventSchema]


# --- Config / control ---

class GameConfigResponse(BaseModel):
    tile_degrees: float
    neighborhood_size: int
    cache_spawn_probability: float
    max_coins_per_cache: int
    randomize_coin_count: bool
    start: LatLngSchema


class ControlResponse(BaseModel):
    status: str
    message: str


# --- Converters ---

def bounds_schema(board: Board, cell: Cell) -> BoundsSchema:
    b = board.bounds_for_cell(cell)
    return BoundsSchema(
        south_west=LatLngSchema(lat=b.south_west.lat, lng=b.south_west.lng),
        north_east=LatLngSchema(lat=b.north_east.lat, lng=b.north_east.lng),
    )


def center_schema(board: Board, cell: Cell) -> LatLngSchema:
    c = board.cell_center(cell)
    return LatLngSchema(lat=c.lat, lng=c.lng)


def cell_schema(board: Board, cell: Cell) -> CellSchema:
    return CellSchema(i=cell.i, j=cell.j, bounds=bounds_schema(board, cell), center=center_schema(board, cell))


def coin_schema(coin: Coin) -> CoinSchema:
    return CoinSchema(serial=coin.serial, i=coin.i, j=coin.j)


def cache_schema(board: Board, cache: Cache) -> CacheSchema:
    return CacheSchema(
        i=cache.cell.i,
        j=cache.cell.j,
        state=cache.state.name.lower(),
        bounds=bounds_schema(board, cache.cell),
        center=center_schema(board, cache.cell),
        coin_count=len(cache),
        coins=[coin_schema(c) for c in cache.coins],
    )


def event_schema(event: GameEvent) -> EventSchema:
    i, j = event.cell if event.cell is not None else (None, None)
    return EventSchema(seq=event.seq, category=event.category, message=event.message, i=i, j=j)
