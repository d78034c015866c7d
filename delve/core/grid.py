"""Tile grid and room rectangles."""

from __future__ import annotations

from dataclasses import dataclass

from delve.core.models import Vector2


@dataclass(slots=True)
class Tile:
    """One map cell.

    ``blocked`` and ``block_sight`` are settled by the generator; afterwards
    only ``explored`` changes, and only from False to True.
    """

    blocked: bool = True
    block_sight: bool = True
    explored: bool = False

    @classmethod
    def wall(cls) -> Tile:
        return cls(blocked=True, block_sight=True)


class TileGrid:
    """2D tile grid backed by a flat list for cache-friendly access."""

    __slots__ = ("width", "height", "_tiles")

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._tiles: list[Tile] = [Tile.wall() for _ in range(width * height)]

    # -- access --

    def _idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> Tile:
        """Return the tile at (x, y); out-of-bounds reads as a detached wall."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._tiles[y * self.width + x]
        return Tile.wall()

    def is_blocked(self, x: int, y: int) -> bool:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._tiles[y * self.width + x].blocked
        return True

    def blocks_sight(self, x: int, y: int) -> bool:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._tiles[y * self.width + x].block_sight
        return True

    def is_explored(self, x: int, y: int) -> bool:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._tiles[y * self.width + x].explored
        return False

    def mark_explored(self, x: int, y: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._tiles[y * self.width + x].explored = True

    def tiles(self) -> list[Tile]:
        """Row-major view of all tiles."""
        return self._tiles

    # -- generation-time carving --

    def carve(self, x: int, y: int) -> None:
        if self.in_bounds(x, y):
            t = self._tiles[self._idx(x, y)]
            t.blocked = False
            t.block_sight = False

    def fill(self, x: int, y: int) -> None:
        """Turn (x, y) back into wall; used by hand-built maps."""
        if self.in_bounds(x, y):
            t = self._tiles[self._idx(x, y)]
            t.blocked = True
            t.block_sight = True

    def carve_room(self, room: Rect) -> None:
        for y in range(room.y1 + 1, room.y2):
            for x in range(room.x1 + 1, room.x2):
                self.carve(x, y)

    def carve_h_tunnel(self, x1: int, x2: int, y: int) -> None:
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self.carve(x, y)

    def carve_v_tunnel(self, y1: int, y2: int, x: int) -> None:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self.carve(x, y)


@dataclass(frozen=True, slots=True)
class Rect:
    """A room outline; the walkable interior excludes the border."""

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> Rect:
        return cls(x, y, x + w, y + h)

    @property
    def center(self) -> Vector2:
        return Vector2((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: Rect, margin: int = 0) -> bool:
        """Inclusive overlap test, grown by *margin* on every side."""
        return (
            self.x1 - margin <= other.x2
            and self.x2 + margin >= other.x1
            and self.y1 - margin <= other.y2
            and self.y2 + margin >= other.y1
        )

    def within(self, width: int, height: int) -> bool:
        return 0 <= self.x1 and 0 <= self.y1 and self.x2 < width and self.y2 < height

    def contains_interior(self, x: int, y: int) -> bool:
        return self.x1 < x < self.x2 and self.y1 < y < self.y2
