"""POST /api/v1/control/reset — start a fresh session."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from geocoin.api.dependencies import get_session_manager
from geocoin.api.schemas import ControlResponse
from geocoin.api.session_manager import SessionManager

router = APIRouter()


@router.post("/control/reset", response_model=ControlResponse)
def reset(manager: SessionManager = Depends(get_session_manager)) -> ControlResponse:
    manager.reset()
    return ControlResponse(status="ok", message="Session reset.")
