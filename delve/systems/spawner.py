"""Room population — depth-dependent monster and item spawning."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from delve.actions.movement import is_blocked
from delve.core.enums import DeathCallback
from delve.core.models import PLAYER_ID, Ai, Entity, Fighter, Vector2
from delve.core.templates import ITEM_REGISTRY, MONSTER_REGISTRY
from delve.systems.tables import ProgressionTable, chance_tables, level_weighted_table

if TYPE_CHECKING:
    from delve.config import DungeonConfig
    from delve.core.entity_store import EntityStore
    from delve.core.grid import Rect, TileGrid
    from delve.systems.rng import RandomStream

logger = logging.getLogger(__name__)


def make_player(config: DungeonConfig, pos: Vector2) -> Entity:
    """Fresh player entity (id 0) built from the config template."""
    return Entity(
        id=PLAYER_ID,
        name=config.player_name,
        pos=pos,
        glyph="@",
        blocks=True,
        alive=True,
        fighter=Fighter(
            max_hp=config.player_hp, hp=config.player_hp,
            defense=config.player_defense, power=config.player_power,
            on_death=DeathCallback.PLAYER,
        ),
    )


def make_monster(entity_id: int, kind: str, pos: Vector2) -> Entity:
    tmpl = MONSTER_REGISTRY[kind]
    return Entity(
        id=entity_id,
        name=tmpl.name,
        pos=pos,
        glyph=tmpl.glyph,
        blocks=True,
        alive=True,
        fighter=Fighter(
            max_hp=tmpl.hp, hp=tmpl.hp, defense=tmpl.defense,
            power=tmpl.power, xp=tmpl.xp, on_death=DeathCallback.MONSTER,
        ),
        ai=Ai(),
    )


def make_item(entity_id: int, item_id: str, pos: Vector2) -> Entity:
    tmpl = ITEM_REGISTRY[item_id]
    return Entity(
        id=entity_id,
        name=tmpl.name,
        pos=pos,
        glyph=tmpl.glyph,
        item=tmpl.effect,
    )


def make_stairs(entity_id: int, pos: Vector2) -> Entity:
    return Entity(id=entity_id, name="stairs", pos=pos, glyph=">", always_visible=True)


class SpawnTables:
    """Populates rooms from the config's progression and weight tables."""

    __slots__ = ("_max_monsters", "_max_items", "_monster_chances", "_item_chances")

    def __init__(self, config: DungeonConfig) -> None:
        # an unsorted table raises ConstructionError here, not mid-generation
        self._max_monsters = ProgressionTable(tuple(config.max_room_monsters))
        self._max_items = ProgressionTable(tuple(config.max_room_items))
        self._monster_chances = chance_tables(config.monster_chances)
        self._item_chances = chance_tables(config.item_chances)

    def max_monsters(self, level: int) -> int:
        return self._max_monsters.at(level)

    def max_items(self, level: int) -> int:
        return self._max_items.at(level)

    def populate_room(
        self,
        room: Rect,
        level: int,
        grid: TileGrid,
        store: EntityStore,
        rng: RandomStream,
    ) -> list[int]:
        """Spawn monsters then items inside *room*; returns the new entity ids."""
        spawned: list[int] = []

        num_monsters = rng.randrange(0, self.max_monsters(level) + 1)
        if num_monsters:
            monster_table = level_weighted_table(self._monster_chances, level)
            for _ in range(num_monsters):
                pos = self._random_interior(room, rng)
                kind = monster_table.choose(rng)
                if is_blocked(pos.x, pos.y, grid, store):
                    logger.debug("Skipped %s spawn at %s: tile blocked", kind, pos)
                    continue
                monster = make_monster(store.allocate_id(), kind, pos)
                store.add(monster)
                spawned.append(monster.id)

        num_items = rng.randrange(0, self.max_items(level) + 1)
        if num_items:
            item_table = level_weighted_table(self._item_chances, level)
            for _ in range(num_items):
                pos = self._random_interior(room, rng)
                item_id = item_table.choose(rng)
                if is_blocked(pos.x, pos.y, grid, store):
                    logger.debug("Skipped %s spawn at %s: tile blocked", item_id, pos)
                    continue
                item = make_item(store.allocate_id(), item_id, pos)
                store.add(item)
                spawned.append(item.id)

        return spawned

    @staticmethod
    def _random_interior(room: Rect, rng: RandomStream) -> Vector2:
        return Vector2(rng.randrange(room.x1 + 1, room.x2), rng.randrange(room.y1 + 1, room.y2))
