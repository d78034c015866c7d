"""EntityStore — the ordered, id-addressed collection every resolver works on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from delve.core.errors import InvariantViolation
from delve.core.models import PLAYER_ID, Entity

if TYPE_CHECKING:
    from delve.core.grid import TileGrid


class EntityStore:
    """Insertion-ordered entities keyed by stable integer id.

    Store order is the monster-turn order and the tie-break order for
    positional queries. Ids are never reused within a store.
    """

    __slots__ = ("_entities", "_next_id")

    def __init__(self, first_id: int = PLAYER_ID) -> None:
        self._entities: dict[int, Entity] = {}
        self._next_id: int = first_id

    # -- identity --

    def allocate_id(self) -> int:
        eid = self._next_id
        self._next_id += 1
        return eid

    @property
    def next_id(self) -> int:
        return self._next_id

    def add(self, entity: Entity) -> None:
        if entity.id in self._entities:
            raise InvariantViolation(f"duplicate entity id {entity.id}")
        if not self._entities and entity.id != PLAYER_ID:
            raise InvariantViolation(f"first entity must be the player, got id {entity.id}")
        self._entities[entity.id] = entity
        if entity.id >= self._next_id:
            self._next_id = entity.id + 1

    def remove(self, entity_id: int) -> Entity:
        if entity_id == PLAYER_ID:
            raise InvariantViolation("the player cannot be removed from the store")
        return self._entities.pop(entity_id)

    # -- lookup --

    def get(self, entity_id: int) -> Entity | None:
        return self._entities.get(entity_id)

    def __getitem__(self, entity_id: int) -> Entity:
        return self._entities[entity_id]

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities.values())

    def __len__(self) -> int:
        return len(self._entities)

    def ids(self) -> list[int]:
        return list(self._entities)

    @property
    def player(self) -> Entity:
        player = self._entities.get(PLAYER_ID)
        if player is None:
            raise InvariantViolation("player (id 0) missing from the store")
        return player

    # -- positional queries (first in store order wins) --

    def first_at(self, x: int, y: int) -> Entity | None:
        for e in self._entities.values():
            if e.pos.x == x and e.pos.y == y:
                return e
        return None

    def blocking_at(self, x: int, y: int) -> Entity | None:
        for e in self._entities.values():
            if e.blocks and e.pos.x == x and e.pos.y == y:
                return e
        return None

    def living_fighter_at(self, x: int, y: int, exclude: int | None = None) -> Entity | None:
        """First alive entity with combat stats at (x, y), skipping *exclude*."""
        for e in self._entities.values():
            if e.id == exclude:
                continue
            if e.alive and e.fighter is not None and e.pos.x == x and e.pos.y == y:
                return e
        return None

    def item_at(self, x: int, y: int) -> Entity | None:
        for e in self._entities.values():
            if e.item is not None and e.pos.x == x and e.pos.y == y:
                return e
        return None

    # -- invariants --

    def validate(self, grid: TileGrid) -> None:
        """Raise InvariantViolation if the store is not in a legal state."""
        ids = list(self._entities)
        if not ids or ids[0] != PLAYER_ID:
            raise InvariantViolation("player (id 0) must be present and first")
        for e in self._entities.values():
            if not grid.in_bounds(e.pos.x, e.pos.y):
                raise InvariantViolation(f"entity {e.id} ({e.name}) out of bounds at {e.pos}")
