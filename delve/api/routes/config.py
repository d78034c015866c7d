"""GET /api/v1/config — expose the dungeon configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from delve.api.dependencies import get_session_manager
from delve.api.schemas import DungeonConfigResponse
from delve.api.session_manager import SessionManager

router = APIRouter()


@router.get("/config", response_model=DungeonConfigResponse)
def get_config(
    manager: SessionManager = Depends(get_session_manager),
) -> DungeonConfigResponse:
    cfg = manager.config
    return DungeonConfigResponse(
        seed=cfg.seed,
        map_width=cfg.map_width,
        map_height=cfg.map_height,
        room_min_size=cfg.room_min_size,
        room_max_size=cfg.room_max_size,
        max_rooms=cfg.max_rooms,
        fov_radius=cfg.fov_radius,
        fov_light_walls=cfg.fov_light_walls,
        player_hp=cfg.player_hp,
        player_defense=cfg.player_defense,
        player_power=cfg.player_power,
        level_up_base=cfg.level_up_base,
        level_up_factor=cfg.level_up_factor,
        inventory_size=cfg.inventory_size,
        max_room_monsters=[list(entry) for entry in cfg.max_room_monsters],
        max_room_items=[list(entry) for entry in cfg.max_room_items],
    )
