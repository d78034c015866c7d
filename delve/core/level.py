"""A generated dungeon level: the (TileGrid, EntityStore) pair plus layout."""

from __future__ import annotations

from dataclasses import dataclass, field

from delve.core.entity_store import EntityStore
from delve.core.grid import Rect, TileGrid


@dataclass(slots=True)
class Level:
    """Everything that is discarded when the player descends."""

    depth: int
    grid: TileGrid
    entities: EntityStore
    rooms: list[Rect] = field(default_factory=list)
    stairs_id: int | None = None
