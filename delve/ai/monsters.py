"""Monster behaviours — one action per eligible turn.

Handlers are registered in MONSTER_HANDLERS by AIKind; adding a behaviour
means writing a handler class and inserting one dict entry.

  BASIC    — idle until seen by the player, then close in and attack.
  CONFUSED — stumble randomly for a number of turns, then revert.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from delve.actions.combat import attack, display_name
from delve.actions.movement import move_entity, move_towards
from delve.core.enums import AIKind
from delve.core.models import PLAYER_ID, Ai

if TYPE_CHECKING:
    from delve.core.context import TurnContext

logger = logging.getLogger(__name__)


class MonsterHandler(ABC):
    """Base class for a monster behaviour."""

    @abstractmethod
    def take_turn(self, monster_id: int, ctx: TurnContext) -> None:
        """Perform exactly one action for *monster_id*."""


class BasicMonster(MonsterHandler):
    """Acts only while the player can see it."""

    def take_turn(self, monster_id: int, ctx: TurnContext) -> None:
        monster = ctx.store[monster_id]
        if not ctx.fov.is_in_fov(monster.pos.x, monster.pos.y):
            return
        player = ctx.store.player
        if monster.distance_to(player) >= 2:
            move_towards(monster_id, player.pos.x, player.pos.y, ctx.grid, ctx.store)
        elif player.alive and player.fighter is not None:
            attack(monster_id, PLAYER_ID, ctx)


class ConfusedMonster(MonsterHandler):
    """Random steps while ``turns`` remain, then the previous behaviour returns."""

    def take_turn(self, monster_id: int, ctx: TurnContext) -> None:
        monster = ctx.store[monster_id]
        ai = monster.ai
        if ai is None:
            return
        if ai.turns > 0:
            dx = ctx.rng.randrange(-1, 2)
            dy = ctx.rng.randrange(-1, 2)
            move_entity(monster_id, dx, dy, ctx.grid, ctx.store)
            ai.turns -= 1
            return
        monster.ai = ai.previous if ai.previous is not None else Ai()
        ctx.log.add(f"{display_name(monster)} is no longer confused!", "ai")
        logger.debug("Entity %d recovered from confusion", monster_id)


MONSTER_HANDLERS: dict[AIKind, MonsterHandler] = {
    AIKind.BASIC: BasicMonster(),
    AIKind.CONFUSED: ConfusedMonster(),
}


def take_turn(monster_id: int, ctx: TurnContext) -> None:
    """Dispatch one turn for *monster_id* to its behaviour handler."""
    monster = ctx.store[monster_id]
    if monster.ai is None:
        return
    handler = MONSTER_HANDLERS.get(monster.ai.kind)
    if handler is None:
        raise AssertionError(f"no handler registered for {monster.ai.kind!r}")
    handler.take_turn(monster_id, ctx)
