"""Core data models: Vector2, Fighter, Ai, Entity."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from delve.core.enums import AIKind, DeathCallback, ItemKind


PLAYER_ID = 0


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def distance(self, other: Vector2) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


# Eight-way step offsets keyed by compass name
DIRECTION_OFFSETS: dict[str, Vector2] = {
    "n": Vector2(0, -1),
    "ne": Vector2(1, -1),
    "e": Vector2(1, 0),
    "se": Vector2(1, 1),
    "s": Vector2(0, 1),
    "sw": Vector2(-1, 1),
    "w": Vector2(-1, 0),
    "nw": Vector2(-1, -1),
}


@dataclass(slots=True)
class Fighter:
    """Mutable combat statistics."""

    max_hp: int
    hp: int
    defense: int
    power: int
    xp: int = 0                 # awarded to the killer (monsters) / accumulated (player)
    on_death: DeathCallback = DeathCallback.MONSTER

    def copy(self) -> Fighter:
        return Fighter(
            max_hp=self.max_hp, hp=self.hp, defense=self.defense,
            power=self.power, xp=self.xp, on_death=self.on_death,
        )


@dataclass(slots=True)
class Ai:
    """Monster behaviour; CONFUSED remembers what to revert to."""

    kind: AIKind = AIKind.BASIC
    previous: Ai | None = None
    turns: int = 0

    def copy(self) -> Ai:
        return Ai(
            kind=self.kind,
            previous=self.previous.copy() if self.previous else None,
            turns=self.turns,
        )


@dataclass(slots=True)
class Entity:
    """Anything that lives in the entity store: player, monster, item, stairs."""

    id: int
    name: str
    pos: Vector2
    glyph: str = "?"
    blocks: bool = False
    alive: bool = False
    fighter: Fighter | None = None
    ai: Ai | None = None
    item: ItemKind | None = None
    always_visible: bool = False
    level: int = 1
    inventory: list[Entity] = field(default_factory=list)

    @property
    def is_player(self) -> bool:
        return self.id == PLAYER_ID

    def distance_to(self, other: Entity) -> float:
        return self.pos.distance(other.pos)

    def copy(self) -> Entity:
        """Deep copy, detached from the store."""
        return Entity(
            id=self.id,
            name=self.name,
            pos=self.pos,
            glyph=self.glyph,
            blocks=self.blocks,
            alive=self.alive,
            fighter=self.fighter.copy() if self.fighter else None,
            ai=self.ai.copy() if self.ai else None,
            item=self.item,
            always_visible=self.always_visible,
            level=self.level,
            inventory=[i.copy() for i in self.inventory],
        )
