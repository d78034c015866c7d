"""DungeonGenerator — rooms-and-corridors level construction.

Algorithm:
  1. Start from a fully blocked, sight-blocking grid.
  2. Up to ``max_rooms`` times, sample a room; retry on overlap up to the
     attempt budget, skip the room if it never fits.
  3. Carve each accepted room. The first hosts the player; later rooms are
     populated from the spawn tables and then joined to the previous room
     by an L-shaped corridor with a randomly chosen bend.
  4. Put the stairs down at the centre of the last room.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from delve.core.entity_store import EntityStore
from delve.core.errors import ConstructionError
from delve.core.grid import Rect, TileGrid
from delve.core.level import Level
from delve.core.models import PLAYER_ID
from delve.systems.spawner import SpawnTables, make_player, make_stairs

if TYPE_CHECKING:
    from delve.config import DungeonConfig
    from delve.core.models import Entity
    from delve.systems.rng import RandomStream

logger = logging.getLogger(__name__)


class DungeonGenerator:
    """Builds one Level per call from the config's room and spawn settings."""

    __slots__ = ("_config", "_spawns")

    def __init__(self, config: DungeonConfig, spawns: SpawnTables | None = None) -> None:
        self._config = config
        self._spawns = spawns or SpawnTables(config)

    def generate(
        self,
        width: int,
        height: int,
        max_rooms: int,
        level: int,
        rng: RandomStream,
        player: Entity | None = None,
        first_id: int = 1,
        spawn_rng: RandomStream | None = None,
    ) -> Level:
        """Build a new level. *player*, if given, is carried in as id 0.

        *first_id* seeds monster/item numbering so ids stay unique across a
        session's levels. Room population draws from *spawn_rng* when given,
        so the layout does not shift when spawn tables change.
        """
        spawn_rng = spawn_rng or rng
        cfg = self._config
        self._check_bounds(width, height, max_rooms)

        grid = TileGrid(width, height)
        store = EntityStore(first_id=max(first_id, PLAYER_ID + 1))
        rooms: list[Rect] = []

        for room_idx in range(max_rooms):
            room = self._place_room(width, height, rooms, rng)
            if room is None:
                logger.debug("Room #%d skipped after %d attempts", room_idx, cfg.room_placement_attempts)
                continue

            grid.carve_room(room)
            center = room.center

            if not rooms:
                if player is None:
                    player = make_player(cfg, center)
                else:
                    player.pos = center
                if player.id != PLAYER_ID:
                    raise ConstructionError(f"carried player must have id 0, got {player.id}")
                store.add(player)
            else:
                self._spawns.populate_room(room, level, grid, store, spawn_rng)
                prev = rooms[-1].center
                if rng.random() < 0.5:
                    grid.carve_h_tunnel(prev.x, center.x, prev.y)
                    grid.carve_v_tunnel(prev.y, center.y, center.x)
                else:
                    grid.carve_v_tunnel(prev.y, center.y, prev.x)
                    grid.carve_h_tunnel(prev.x, center.x, center.y)

            rooms.append(room)

        last = rooms[-1].center
        stairs = make_stairs(store.allocate_id(), last)
        store.add(stairs)

        store.validate(grid)
        logger.info(
            "Generated level %d: %dx%d, %d rooms, %d entities",
            level, width, height, len(rooms), len(store),
        )
        return Level(depth=level, grid=grid, entities=store, rooms=rooms, stairs_id=stairs.id)

    # -- internals --

    def _check_bounds(self, width: int, height: int, max_rooms: int) -> None:
        cfg = self._config
        if max_rooms <= 0:
            raise ConstructionError(f"max_rooms must be positive, got {max_rooms}")
        if cfg.room_min_size < 3 or cfg.room_max_size < cfg.room_min_size:
            raise ConstructionError(
                f"invalid room size range [{cfg.room_min_size}, {cfg.room_max_size}]"
            )
        if width <= cfg.room_min_size or height <= cfg.room_min_size:
            raise ConstructionError(
                f"grid {width}x{height} too small for a room of size {cfg.room_min_size}"
            )
        if cfg.room_placement_attempts <= 0:
            raise ConstructionError("room_placement_attempts must be positive")

    def _place_room(self, width: int, height: int, rooms: list[Rect], rng: RandomStream) -> Rect | None:
        cfg = self._config
        max_w = min(cfg.room_max_size, width - 1)
        max_h = min(cfg.room_max_size, height - 1)
        for _ in range(cfg.room_placement_attempts):
            w = rng.randrange(cfg.room_min_size, max_w + 1)
            h = rng.randrange(cfg.room_min_size, max_h + 1)
            x = rng.randrange(0, width - w)
            y = rng.randrange(0, height - h)
            candidate = Rect.from_size(x, y, w, h)
            if any(candidate.intersects(other, cfg.room_margin) for other in rooms):
                continue
            return candidate
        return None

