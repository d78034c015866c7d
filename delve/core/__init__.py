"""Core data models: tiles, entities, the entity store and message log."""

from delve.core.enums import ActionKind, Advance, Domain, PlayerAction, TurnState
from delve.core.errors import ConstructionError, InvariantViolation
from delve.core.models import PLAYER_ID, Entity, Fighter, Vector2
from delve.core.grid import Rect, Tile, TileGrid
from delve.core.entity_store import EntityStore
from delve.core.level import Level
from delve.core.messages import MessageLog

__all__ = [
    "PLAYER_ID",
    "ActionKind",
    "Advance",
    "ConstructionError",
    "Domain",
    "Entity",
    "EntityStore",
    "Fighter",
    "InvariantViolation",
    "Level",
    "MessageLog",
    "PlayerAction",
    "Rect",
    "Tile",
    "TileGrid",
    "TurnState",
    "Vector2",
]
