"""POST /api/v1/control/{action} — session lifecycle controls."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, Query

from delve.api.dependencies import get_session_manager
from delve.api.schemas import ControlResponse
from delve.api.session_manager import SessionManager

router = APIRouter()


class ControlAction(str, Enum):
    reset = "reset"


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    seed: int | None = Query(None, description="Reseed the new session"),
    manager: SessionManager = Depends(get_session_manager),
) -> ControlResponse:
    match action:
        case ControlAction.reset:
            manager.reset(seed)
            return ControlResponse(
                status="ok", message=f"Session reset with seed {manager.config.seed}.", turn=0,
            )
        case _:
            raise AssertionError(f"unreachable control action {action!r}")
