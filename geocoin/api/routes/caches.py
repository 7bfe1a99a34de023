"""Cache endpoints: spawn/list around a point, inspect, collect, deposit."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from geocoin.api.dependencies import get_session_manager
from geocoin.api.schemas import (
    CacheSchema,
    CachesResponse,
    LatLngSchema,
    TransferResponse,
    cache_schema,
    coin_schema,
)
from geocoin.api.session_manager import SessionManager
from geocoin.core.errors import CacheNotFound
from geocoin.core.models import LatLng

router = APIRouter()


@router.get("/caches", response_model=CachesResponse)
def get_caches(
    lat: float | None = Query(None, description="Latitude; defaults to the player position"),
    lng: float | None = Query(None, description="Longitude; defaults to the player position"),
    manager: SessionManager = Depends(get_session_manager),
) -> CachesResponse:
    with manager.session() as session:
        player = session.player_point
        point = LatLng(lat if lat is not None else player.lat, lng if lng is not None else player.lng)
        caches = session.spawn_nearby(point)
        return CachesResponse(
            player=LatLngSchema(lat=player.lat, lng=player.lng),
            count=len(caches),
            caches=[cache_schema(session.board, c) for c in caches],
        )


@router.get("/caches/{i}/{j}", response_model=CacheSchema)
def get_cache(i: int, j: int, manager: SessionManager = Depends(get_session_manager)) -> CacheSchema:
    with manager.session() as session:
        cache = session.cache_at(i, j)
        if cache is None:
            raise HTTPException(status_code=404, detail=f"No cache at cell ({i}, {j}).")
        return cache_schema(session.board, cache)


@router.post("/caches/{i}/{j}/collect", response_model=TransferResponse)
def collect_coin(i: int, j: int, manager: SessionManager = Depends(get_session_manager)) -> TransferResponse:
    with manager.session() as session:
        try:
            coin = session.collect(i, j)
        except CacheNotFound as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        cache_coins = len(session.cache_at(i, j))
        inventory_coins = len(session.inventory)

    if coin is None:
        return TransferResponse(
            status="noop", message="Cache is empty.",
            cache_coins=cache_coins, inventory_coins=inventory_coins,
        )
    return TransferResponse(
        status="ok", message=f"Collected coin {coin.serial}.", coin=coin_schema(coin),
        cache_coins=cache_coins, inventory_coins=inventory_coins,
    )


@router.post("/caches/{i}/{j}/deposit", response_model=TransferResponse)
def deposit_coin(i: int, j: int, manager: SessionManager = Depends(get_session_manager)) -> TransferResponse:
    with manager.session() as session:
        try:
            coin = session.deposit(i, j)
        except CacheNotFound as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        cache_coins = len(session.cache_at(i, j))
        inventory_coins = len(session.inventory)

    if coin is None:
        return TransferResponse(
            status="noop", message="Inventory is empty.",
            cache_coins=cache_coins, inventory_coins=inventory_coins,
        )
    return TransferResponse(
        status="ok", message=f"Deposited coin {coin.serial}.", coin=coin_schema(coin),
        cache_coins=cache_coins, inventory_coins=inventory_coins,
    )
