"""Player inventory and event feed."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from geocoin.api.dependencies import get_session_manager
from geocoin.api.schemas import EventsResponse, InventoryResponse, coin_schema, event_schema
from geocoin.api.session_manager import SessionManager

router = APIRouter()


@router.get("/inventory", response_model=InventoryResponse)
def get_inventory(manager: SessionManager = Depends(get_session_manager)) -> InventoryResponse:
    with manager.session() as session:
        return InventoryResponse(
            count=len(session.inventory),
            coins=[coin_schema(c) for c in session.inventory.coins],
            total_coins=session.total_coins(),
            minted_coins=session.mint.issued,
        )


@router.get("/events", response_model=EventsResponse)
def get_events(
    since: int = Query(0, ge=0, description="Return events with seq >= since"),
    manager: SessionManager = Depends(get_session_manager),
) -> EventsResponse:
    with manager.session() as session:
        events = session.events.since(since)
    return EventsResponse(events=[event_schema(e) for e in events])
