"""Monster and item blueprints.

Templates are pydantic dataclasses so the API can serialize them
directly; spawned entities copy their numbers out of a template.
"""

from __future__ import annotations

from pydantic.dataclasses import dataclass as pydantic_dataclass

from delve.core.enums import ItemKind


# ---------------------------------------------------------------------------
# Monster templates
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class MonsterTemplate:
    """Immutable blueprint for a monster kind."""

    kind: str
    name: str
    glyph: str
    hp: int
    defense: int
    power: int
    xp: int


MONSTER_REGISTRY: dict[str, MonsterTemplate] = {}


def _reg_monster(t: MonsterTemplate) -> MonsterTemplate:
    MONSTER_REGISTRY[t.kind] = t
    return t


_reg_monster(MonsterTemplate(kind="orc",   name="orc",   glyph="o", hp=20, defense=0, power=4, xp=35))
_reg_monster(MonsterTemplate(kind="troll", name="troll", glyph="T", hp=30, defense=2, power=8, xp=100))


# ---------------------------------------------------------------------------
# Item templates
# ---------------------------------------------------------------------------

@pydantic_dataclass(frozen=True)
class ItemTemplate:
    """Immutable blueprint for a consumable."""

    item_id: str
    name: str
    glyph: str
    effect: ItemKind
    description: str = ""


ITEM_REGISTRY: dict[str, ItemTemplate] = {}


def _reg_item(t: ItemTemplate) -> ItemTemplate:
    ITEM_REGISTRY[t.item_id] = t
    return t


_reg_item(ItemTemplate(
    item_id="healing_potion", name="healing potion", glyph="!", effect=ItemKind.HEAL,
    description="Restores health, up to the drinker's maximum.",
))
_reg_item(ItemTemplate(
    item_id="scroll_of_lightning", name="scroll of lightning bolt", glyph="#", effect=ItemKind.LIGHTNING,
    description="Strikes the closest visible enemy.",
))
_reg_item(ItemTemplate(
    item_id="scroll_of_confusion", name="scroll of confusion", glyph="#", effect=ItemKind.CONFUSE,
    description="Makes the closest visible enemy wander aimlessly for a while.",
))
