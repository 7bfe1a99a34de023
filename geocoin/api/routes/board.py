"""GET /api/v1/cells — grid cells around a point."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from geocoin.api.dependencies import get_session_manager
from geocoin.api.schemas import CellsResponse, cell_schema
from geocoin.api.session_manager import SessionManager
from geocoin.core.models import LatLng

router = APIRouter()


@router.get("/cells", response_model=CellsResponse)
def get_cells(
    lat: float | None = Query(None, description="Latitude; defaults to the player position"),
    lng: float | None = Query(None, description="Longitude; defaults to the player position"),
    radius: int | None = Query(None, ge=0, le=64, description="Tiles around the origin; defaults to the visibility radius"),
    manager: SessionManager = Depends(get_session_manager),
) -> CellsResponse:
    with manager.session() as session:
        board = session.board
        player = session.player_point
        point = LatLng(lat if lat is not None else player.lat, lng if lng is not None else player.lng)
        if radius is None:
            radius = board.visibility_radius
        origin = board.cell_for_point(point)
        cells = board.neighborhood(point, radius)
        return CellsResponse(
            origin=cell_schema(board, origin),
            radius=radius,
            cells=[cell_schema(board, c) for c in cells],
        )
