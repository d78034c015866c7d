"""GET /api/v1/state — player, visible entities and messages (polled by UI)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query

from delve.api.dependencies import get_session_manager, require_session
from delve.api.schemas import (
    EntitySchema,
    GameStateResponse,
    InventorySlotSchema,
    MessageSchema,
)
from delve.api.session_manager import SessionManager

if TYPE_CHECKING:
    from delve.core.models import Entity
    from delve.engine.session import GameSession

router = APIRouter()


def serialize_entity(e: Entity) -> EntitySchema:
    f = e.fighter
    return EntitySchema(
        id=e.id,
        name=e.name,
        glyph=e.glyph,
        x=e.pos.x,
        y=e.pos.y,
        blocks=e.blocks,
        alive=e.alive,
        hp=f.hp if f else None,
        max_hp=f.max_hp if f else None,
        power=f.power if f else None,
        defense=f.defense if f else None,
        xp=f.xp if f else None,
        level=e.level if f else None,
        ai=e.ai.kind.name.lower() if e.ai else None,
        item=e.item.name.lower() if e.item is not None else None,
    )


def build_state(session: GameSession, since_turn: int = 0, limit: int = 20) -> GameStateResponse:
    player = session.level.entities.player
    messages = session.log.since_turn(since_turn)[-limit:]
    return GameStateResponse(
        turn=session.controller.turn,
        depth=session.depth,
        state=session.controller.state.name,
        fullscreen=session.fullscreen,
        player=serialize_entity(player),
        entities=[serialize_entity(e) for e in session.render_entities()],
        inventory=[
            InventorySlotSchema(slot=i, id=item.id, name=item.name, effect=item.item.name.lower())
            for i, item in enumerate(player.inventory)
            if item.item is not None
        ],
        messages=[MessageSchema(turn=m.turn, category=m.category, text=m.text) for m in messages],
    )


@router.get("/state", response_model=GameStateResponse)
def get_state(
    since_turn: int = Query(0, ge=0, description="Only return messages since this turn"),
    limit: int = Query(20, ge=1, le=200, description="Maximum number of messages"),
    manager: SessionManager = Depends(get_session_manager),
) -> GameStateResponse:
    with manager.locked() as session:
        session = require_session(session)
        return build_state(session, since_turn, limit)
