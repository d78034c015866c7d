"""TurnContext — the bundle every resolver, item and AI handler receives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from delve.config import DungeonConfig
    from delve.core.entity_store import EntityStore
    from delve.core.grid import TileGrid
    from delve.core.messages import MessageLog
    from delve.systems.fov import VisibilityEngine
    from delve.systems.rng import RandomStream


@dataclass(slots=True)
class TurnContext:
    """All state an action may read or mutate during one turn.

    Extend this rather than widening every handler signature.
    """

    grid: TileGrid
    store: EntityStore
    fov: VisibilityEngine
    log: MessageLog
    rng: RandomStream
    config: DungeonConfig
