"""Movement — blocking queries and id-addressed moves over the entity store.

Moves are free functions taking an entity id and the store rather than
methods on Entity: testing the destination means scanning every entity,
including the mover, while the mover's position is being changed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from delve.core.models import Vector2

if TYPE_CHECKING:
    from delve.core.entity_store import EntityStore
    from delve.core.grid import TileGrid

logger = logging.getLogger(__name__)


def is_blocked(x: int, y: int, grid: TileGrid, store: EntityStore) -> bool:
    """True if the tile is blocked or a blocking entity stands on it."""
    if grid.is_blocked(x, y):
        return True
    return store.blocking_at(x, y) is not None


def move_entity(entity_id: int, dx: int, dy: int, grid: TileGrid, store: EntityStore) -> bool:
    """Step *entity_id* by (dx, dy) unless the destination is blocked.

    A rejected move is a normal outcome, not an error; returns whether the
    entity moved.
    """
    entity = store[entity_id]
    dest = Vector2(entity.pos.x + dx, entity.pos.y + dy)
    if dest == entity.pos:
        return False
    if grid.is_blocked(dest.x, dest.y):
        logger.debug("Entity %d blocked by terrain at %s", entity_id, dest)
        return False
    occupant = store.blocking_at(dest.x, dest.y)
    if occupant is not None:
        logger.debug("Entity %d blocked by entity %d at %s", entity_id, occupant.id, dest)
        return False
    entity.pos = dest
    return True


def move_towards(entity_id: int, target_x: int, target_y: int, grid: TileGrid, store: EntityStore) -> bool:
    """Take one step along the normalized direction to the target."""
    entity = store[entity_id]
    dx = target_x - entity.pos.x
    dy = target_y - entity.pos.y
    distance = (dx * dx + dy * dy) ** 0.5
    if distance == 0:
        return False
    step_x = int(round(dx / distance))
    step_y = int(round(dy / distance))
    return move_entity(entity_id, step_x, step_y, grid, store)
