"""Field of view — ray-cast visibility and the explored mask.

A tile within ``radius`` (squared Euclidean distance) is visible when the
straight ray from the observer's tile center to the tile's center, sampled
``subdivisions`` times per tile of distance, does not pass through a
sight-blocking tile before reaching it. Sight-blocking targets themselves
are only visible when ``light_walls`` is on; a post-pass then also lights
walls whose neighbour towards the observer is visible floor, which closes
the gaps a single ray leaves along long straight walls.

Results are close to symmetric for open rooms and corridors, not strictly
symmetric for every geometry.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from delve.core.models import Vector2

if TYPE_CHECKING:
    from delve.config import DungeonConfig
    from delve.core.grid import TileGrid

logger = logging.getLogger(__name__)


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def _ray_clear(grid: TileGrid, ox: int, oy: int, tx: int, ty: int, subdivisions: int) -> bool:
    """True if nothing sight-blocking lies strictly between origin and target."""
    dx = tx - ox
    dy = ty - oy
    steps = max(abs(dx), abs(dy)) * subdivisions
    if steps == 0:
        return True
    step_x = dx / steps
    step_y = dy / steps
    fx = ox + 0.5
    fy = oy + 0.5
    for i in range(1, steps):
        cx = math.floor(fx + i * step_x)
        cy = math.floor(fy + i * step_y)
        if cx == tx and cy == ty:
            return True
        if cx == ox and cy == oy:
            continue
        if grid.blocks_sight(cx, cy):
            return False
    return True


def compute_fov(
    grid: TileGrid,
    origin: Vector2,
    radius: int,
    light_walls: bool = True,
    subdivisions: int = 4,
) -> frozenset[tuple[int, int]]:
    """Return the set of (x, y) visible from *origin*.

    ``radius <= 0`` means no distance limit beyond the grid itself.
    """
    ox, oy = origin.x, origin.y
    if not grid.in_bounds(ox, oy):
        return frozenset()

    if radius > 0:
        x_lo, x_hi = max(0, ox - radius), min(grid.width - 1, ox + radius)
        y_lo, y_hi = max(0, oy - radius), min(grid.height - 1, oy + radius)
    else:
        x_lo, x_hi = 0, grid.width - 1
        y_lo, y_hi = 0, grid.height - 1
    r2 = radius * radius
    subdivisions = max(subdivisions, 1)

    visible: set[tuple[int, int]] = {(ox, oy)}
    for y in range(y_lo, y_hi + 1):
        for x in range(x_lo, x_hi + 1):
            dx = x - ox
            dy = y - oy
            if radius > 0 and dx * dx + dy * dy > r2:
                continue
            if dx == 0 and dy == 0:
                continue
            if not light_walls and grid.blocks_sight(x, y):
                continue
            if _ray_clear(grid, ox, oy, x, y, subdivisions):
                visible.add((x, y))

    if light_walls:
        _light_wall_gaps(grid, ox, oy, radius, visible, (x_lo, x_hi, y_lo, y_hi))

    return frozenset(visible)


def _light_wall_gaps(
    grid: TileGrid,
    ox: int,
    oy: int,
    radius: int,
    visible: set[tuple[int, int]],
    bounds: tuple[int, int, int, int],
) -> None:
    """Light walls that face a visible floor tile on the observer's side."""
    x_lo, x_hi, y_lo, y_hi = bounds
    r2 = radius * radius
    lit: list[tuple[int, int]] = []
    for y in range(y_lo, y_hi + 1):
        for x in range(x_lo, x_hi + 1):
            if (x, y) in visible or not grid.blocks_sight(x, y):
                continue
            dx = x - ox
            dy = y - oy
            if radius > 0 and dx * dx + dy * dy > r2:
                continue
            sx = -_sign(dx)
            sy = -_sign(dy)
            for nx, ny in ((x + sx, y), (x, y + sy), (x + sx, y + sy)):
                if (nx, ny) == (x, y):
                    continue
                if (nx, ny) in visible and not grid.blocks_sight(nx, ny):
                    lit.append((x, y))
                    break
    visible.update(lit)


class VisibilityEngine:
    """Memoized FOV for one observer, feeding the grid's explored mask."""

    __slots__ = ("_radius", "_light_walls", "_subdivisions", "_last_origin", "_visible", "_computations")

    UNSET = Vector2(-1, -1)

    def __init__(self, radius: int, light_walls: bool = True, subdivisions: int = 4) -> None:
        self._radius = radius
        self._light_walls = light_walls
        self._subdivisions = subdivisions
        self._last_origin: Vector2 = self.UNSET
        self._visible: frozenset[tuple[int, int]] = frozenset()
        self._computations = 0

    @classmethod
    def from_config(cls, config: DungeonConfig) -> VisibilityEngine:
        return cls(config.fov_radius, config.fov_light_walls, config.fov_subdivisions)

    @property
    def visible(self) -> frozenset[tuple[int, int]]:
        return self._visible

    @property
    def last_origin(self) -> Vector2:
        return self._last_origin

    @property
    def computations(self) -> int:
        """How many times the FOV was actually recomputed."""
        return self._computations

    def refresh(self, grid: TileGrid, origin: Vector2) -> bool:
        """Recompute if *origin* moved since the last call. Returns True if it did."""
        if origin == self._last_origin:
            return False
        self._visible = compute_fov(grid, origin, self._radius, self._light_walls, self._subdivisions)
        self._last_origin = origin
        self._computations += 1
        for x, y in self._visible:
            grid.mark_explored(x, y)
        logger.debug("FOV recomputed at %s: %d tiles visible", origin, len(self._visible))
        return True

    def reset(self) -> None:
        """Forget the last origin so the next refresh always recomputes."""
        self._last_origin = self.UNSET
        self._visible = frozenset()

    def is_in_fov(self, x: int, y: int) -> bool:
        return (x, y) in self._visible
