"""GameSession — owns one run: config, RNG, current level, view and controller.

The session is the surface presentation and input adapters talk to. Gameplay
mutation goes through ``advance``; the accessors below only read.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from delve.config import DungeonConfig
from delve.core.context import TurnContext
from delve.core.enums import Advance, Domain
from delve.core.errors import InvariantViolation
from delve.core.messages import MessageLog
from delve.engine.turn_controller import TurnController
from delve.systems.dungeon import DungeonGenerator
from delve.systems.fov import VisibilityEngine
from delve.systems.rng import DeterministicRNG

if TYPE_CHECKING:
    from delve.core.entity_store import EntityStore
    from delve.core.grid import TileGrid
    from delve.core.level import Level
    from delve.core.models import Entity
    from delve.engine.input import Action

logger = logging.getLogger(__name__)


class GameSession:
    """A single playthrough, from the first level down."""

    __slots__ = (
        "_config",
        "_rng",
        "_ai_rng",
        "_generator",
        "_level",
        "_fov",
        "_log",
        "_controller",
        "_dimensions",
        "_fullscreen",
    )

    def __init__(self, config: DungeonConfig | None = None) -> None:
        self._config = config or DungeonConfig()
        self._rng = DeterministicRNG(self._config.seed)
        self._ai_rng = self._rng.stream(Domain.AI_DECISION)
        self._generator = DungeonGenerator(self._config)
        self._level: Level | None = None
        self._fov = VisibilityEngine.from_config(self._config)
        self._log = MessageLog(self._config.max_messages)
        self._controller = TurnController(self)
        self._dimensions: tuple[int, int, int] = (
            self._config.map_width, self._config.map_height, self._config.max_rooms,
        )
        self._fullscreen = False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def generate(
        self,
        width: int | None = None,
        height: int | None = None,
        max_rooms: int | None = None,
        level: int = 1,
    ) -> tuple[TileGrid, EntityStore]:
        """Start a fresh run on a newly generated level.

        Omitted dimensions fall back to the config. Raises
        ConstructionError for parameters that cannot hold a room.
        """
        cfg = self._config
        self._dimensions = (
            cfg.map_width if width is None else width,
            cfg.map_height if height is None else height,
            cfg.max_rooms if max_rooms is None else max_rooms,
        )
        self._level = self._build_level(level, player=None, first_id=1)
        self._log.clear()
        self._controller.reset()
        self._fov.reset()
        self.refresh_fov()
        self._log.add("Welcome, adventurer, to the dungeon!", "level")
        return self._level.grid, self._level.entities

    def advance(self, action: Action) -> Advance:
        """Drive one controller step with *action*."""
        return self._controller.advance(action)

    def descend(self) -> bool:
        """Take the stairs if the player stands on them."""
        level = self.level
        player = level.entities.player
        stairs = level.entities.get(level.stairs_id) if level.stairs_id is not None else None
        if stairs is None or stairs.pos != player.pos:
            self._log.add("There are no stairs here.", "level")
            return False

        self._log.add("You take a moment to rest, and recover your strength.", "level")
        fighter = player.fighter
        if fighter is not None:
            fighter.hp = min(fighter.hp + fighter.max_hp // 2, fighter.max_hp)

        depth = level.depth + 1
        self._level = self._build_level(depth, player=player, first_id=level.entities.next_id)
        self._fov.reset()
        self.refresh_fov()
        logger.info("Player descended to depth %d", depth)
        return True

    def adopt(self, level: Level) -> None:
        """Play on a prebuilt *level* (tests, tooling) instead of a generated one."""
        self._level = level
        self._controller.reset()
        self._fov.reset()
        self.refresh_fov()

    def refresh_fov(self) -> bool:
        level = self.level
        return self._fov.refresh(level.grid, level.entities.player.pos)

    def toggle_display(self) -> None:
        self._fullscreen = not self._fullscreen
        logger.debug("Display mode toggled (fullscreen=%s)", self._fullscreen)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> DungeonConfig:
        return self._config

    @property
    def level(self) -> Level:
        if self._level is None:
            raise InvariantViolation("no level generated yet; call generate() first")
        return self._level

    @property
    def started(self) -> bool:
        return self._level is not None

    @property
    def depth(self) -> int:
        return self.level.depth

    @property
    def log(self) -> MessageLog:
        return self._log

    @property
    def fov(self) -> VisibilityEngine:
        return self._fov

    @property
    def controller(self) -> TurnController:
        return self._controller

    @property
    def fullscreen(self) -> bool:
        return self._fullscreen

    @property
    def context(self) -> TurnContext:
        level = self.level
        return TurnContext(
            grid=level.grid,
            store=level.entities,
            fov=self._fov,
            log=self._log,
            rng=self._ai_rng,
            config=self._config,
        )

    def is_in_fov(self, x: int, y: int) -> bool:
        return self._fov.is_in_fov(x, y)

    def is_explored(self, x: int, y: int) -> bool:
        return self.level.grid.is_explored(x, y)

    def entity_at(self, x: int, y: int) -> int | None:
        """Id of the first entity in store order at (x, y), if any."""
        entity = self.level.entities.first_at(x, y)
        return entity.id if entity is not None else None

    def entity(self, entity_id: int) -> Entity:
        """Detached copy of an entity; mutating it does not touch the game."""
        return self.level.entities[entity_id].copy()

    def render_entities(self) -> list[Entity]:
        """Entities to draw this frame, floor clutter before actors.

        An entity is drawn when it is in view, or when it is always visible
        and its tile has been explored.
        """
        drawn = [
            e for e in self.level.entities
            if self.is_in_fov(e.pos.x, e.pos.y)
            or (e.always_visible and self.is_explored(e.pos.x, e.pos.y))
        ]
        return sorted(drawn, key=lambda e: 1 if e.blocks else 0)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _build_level(self, depth: int, player: Entity | None, first_id: int) -> Level:
        width, height, max_rooms = self._dimensions
        return self._generator.generate(
            width,
            height,
            max_rooms,
            depth,
            self._rng.stream(Domain.MAP_GEN, depth),
            player=player,
            first_id=first_id,
            spawn_rng=self._rng.stream(Domain.SPAWN, depth),
        )
