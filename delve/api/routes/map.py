"""GET /api/v1/map — tile layers of the current level."""

from __future__ import annotations

from typing import Iterable

from fastapi import APIRouter, Depends

from delve.api.dependencies import get_session_manager, require_session
from delve.api.schemas import MapResponse
from delve.api.session_manager import SessionManager

router = APIRouter()


def rle_encode(values: Iterable[int]) -> list[int]:
    """Run-length encode as a flat [value, count, value, count, ...] list."""
    rle: list[int] = []
    cur_val: int | None = None
    cur_count = 0
    for v in values:
        if v == cur_val:
            cur_count += 1
            continue
        if cur_val is not None:
            rle.append(cur_val)
            rle.append(cur_count)
        cur_val = v
        cur_count = 1
    if cur_val is not None:
        rle.append(cur_val)
        rle.append(cur_count)
    return rle


@router.get("/map", response_model=MapResponse)
def get_map(manager: SessionManager = Depends(get_session_manager)) -> MapResponse:
    with manager.locked() as session:
        session = require_session(session)

        level = session.level
        tiles = level.grid.tiles()
        return MapResponse(
            width=level.grid.width,
            height=level.grid.height,
            depth=level.depth,
            blocked=rle_encode(int(t.blocked) for t in tiles),
            explored=rle_encode(int(t.explored) for t in tiles),
            visible=[[x, y] for x, y in sorted(session.fov.visible)],
        )
