"""Metadata endpoints — monster and item definitions plus enum names.

MonsterTemplate and ItemTemplate are pydantic dataclasses from
delve.core.templates; they are serialized directly so the client keeps no
hardcoded copy of them.
"""

from __future__ import annotations

from fastapi import APIRouter
from pydantic import BaseModel, TypeAdapter

from delve.core.enums import ActionKind, AIKind, ItemKind
from delve.core.templates import ITEM_REGISTRY, MONSTER_REGISTRY, ItemTemplate, MonsterTemplate

router = APIRouter(prefix="/metadata", tags=["Metadata"])


class EnumEntry(BaseModel):
    id: int
    name: str


class EnumsResponse(BaseModel):
    action_kinds: list[EnumEntry]
    ai_kinds: list[EnumEntry]
    item_kinds: list[EnumEntry]


_monster_ta = TypeAdapter(MonsterTemplate)
_item_ta = TypeAdapter(ItemTemplate)


def _enum_entries(enum_cls) -> list[EnumEntry]:
    return [EnumEntry(id=int(m), name=m.name.lower()) for m in enum_cls]


@router.get("/monsters")
def get_monsters() -> dict:
    return {"monsters": [_monster_ta.dump_python(t, mode="json") for t in MONSTER_REGISTRY.values()]}


@router.get("/items")
def get_items() -> dict:
    return {"items": [_item_ta.dump_python(t, mode="json") for t in ITEM_REGISTRY.values()]}


@router.get("/enums", response_model=EnumsResponse)
def get_enums() -> EnumsResponse:
    return EnumsResponse(
        action_kinds=_enum_entries(ActionKind),
        ai_kinds=_enum_entries(AIKind),
        item_kinds=_enum_entries(ItemKind),
    )


@router.get("")
def get_metadata() -> dict:
    """Everything above in one payload, for clients that load once at startup."""
    return {
        **get_monsters(),
        **get_items(),
        "enums": get_enums().model_dump(),
    }
