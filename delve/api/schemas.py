"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Map ---

class MapResponse(BaseModel):
    width: int
    height: int
    depth: int
    blocked: list[int] = Field(description="RLE [value, count, ...] of the blocked layer, row-major (1=blocked)")
    explored: list[int] = Field(description="RLE [value, count, ...] of the explored mask, row-major (1=explored)")
    visible: list[list[int]] = Field(description="[x, y] pairs currently in the player's field of view")


# --- Entities ---

class EntitySchema(BaseModel):
    id: int
    name: str
    glyph: str
    x: int
    y: int
    blocks: bool
    alive: bool
    hp: int | None = None
    max_hp: int | None = None
    power: int | None = None
    defense: int | None = None
    xp: int | None = None
    level: int | None = None
    ai: str | None = None
    item: str | None = None


class InventorySlotSchema(BaseModel):
    slot: int
    id: int
    name: str
    effect: str


class MessageSchema(BaseModel):
    turn: int
    category: str
    text: str


# --- State ---

class GameStateResponse(BaseModel):
    turn: int
    depth: int
    state: str
    fullscreen: bool
    player: EntitySchema
    entities: list[EntitySchema]
    inventory: list[InventorySlotSchema] = Field(default_factory=list)
    messages: list[MessageSchema] = Field(default_factory=list)


# --- Actions ---

class ActionResponse(BaseModel):
    result: str
    turn: int
    depth: int
    state: str
    player_alive: bool


# --- Control ---

class ControlResponse(BaseModel):
    status: str
    message: str
    turn: int = 0


# --- Config ---

class DungeonConfigResponse(BaseModel):
    seed: int
    map_width: int
    map_height: int
    room_min_size: int
    room_max_size: int
    max_rooms: int
    fov_radius: int
    fov_light_walls: bool
    player_hp: int
    player_defense: int
    player_power: int
    level_up_base: int
    level_up_factor: int
    inventory_size: int
    max_room_monsters: list[list[int]]
    max_room_items: list[list[int]]
