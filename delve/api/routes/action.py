"""POST /api/v1/action/{kind} and /api/v1/key/{name} — drive the turn loop."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, Query

from delve.api.dependencies import get_session_manager, require_session
from delve.api.schemas import ActionResponse
from delve.api.session_manager import SessionManager
from delve.engine.input import Action, action_for_key

router = APIRouter()


class ActionName(str, Enum):
    move = "move"
    toggle_display = "toggle_display"
    quit = "quit"
    pick_up = "pick_up"
    use_item = "use_item"
    descend = "descend"
    ignored = "ignored"


def _to_action(kind: ActionName, dx: int, dy: int, index: int) -> Action:
    match kind:
        case ActionName.move:
            return Action.move(dx, dy)
        case ActionName.toggle_display:
            return Action.toggle_display()
        case ActionName.quit:
            return Action.quit()
        case ActionName.pick_up:
            return Action.pick_up()
        case ActionName.use_item:
            return Action.use_item(index)
        case ActionName.descend:
            return Action.descend()
        case ActionName.ignored:
            return Action.ignored()
        case _:
            raise AssertionError(f"unreachable action name {kind!r}")


def _apply(manager: SessionManager, action: Action) -> ActionResponse:
    with manager.locked() as session:
        session = require_session(session)
        result = session.advance(action)
        return ActionResponse(
            result=result.name.lower(),
            turn=session.controller.turn,
            depth=session.depth,
            state=session.controller.state.name,
            player_alive=session.level.entities.player.alive,
        )


@router.post("/action/{kind}", response_model=ActionResponse)
def post_action(
    kind: ActionName,
    dx: int = Query(0, ge=-1, le=1),
    dy: int = Query(0, ge=-1, le=1),
    index: int = Query(0, ge=0, description="Inventory slot for use_item"),
    manager: SessionManager = Depends(get_session_manager),
) -> ActionResponse:
    return _apply(manager, _to_action(kind, dx, dy, index))


@router.post("/key/{name}", response_model=ActionResponse)
def post_key(
    name: str,
    manager: SessionManager = Depends(get_session_manager),
) -> ActionResponse:
    return _apply(manager, action_for_key(name))
