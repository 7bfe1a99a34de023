"""GET /api/v1/config — expose game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from geocoin.api.dependencies import get_session_manager
from geocoin.api.schemas import GameConfigResponse, LatLngSchema
from geocoin.api.session_manager import SessionManager

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(manager: SessionManager = Depends(get_session_manager)) -> GameConfigResponse:
    cfg = manager.config
    return GameConfigResponse(
        tile_degrees=cfg.tile_degrees,
        neighborhood_size=cfg.neighborhood_size,
        cache_spawn_probability=cfg.cache_spawn_probability,
        max_coins_per_cache=cfg.max_coins_per_cache,
        randomize_coin_count=cfg.randomize_coin_count,
        start=LatLngSchema(lat=cfg.start_lat, lng=cfg.start_lng),
    )
