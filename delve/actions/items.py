"""Items — picking up consumables and using them from the inventory."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from delve.actions.combat import gain_xp, take_damage
from delve.core.enums import AIKind, ItemKind, UseResult
from delve.core.models import Ai

if TYPE_CHECKING:
    from delve.core.context import TurnContext
    from delve.core.models import Entity

logger = logging.getLogger(__name__)


def pick_up(ctx: TurnContext) -> bool:
    """Move the first item under the player into the inventory."""
    player = ctx.store.player
    item = ctx.store.item_at(player.pos.x, player.pos.y)
    if item is None:
        ctx.log.add("There is nothing here to pick up.", "item")
        return False
    if len(player.inventory) >= ctx.config.inventory_size:
        ctx.log.add(f"Your inventory is full, cannot pick up {item.name}.", "item")
        return False
    ctx.store.remove(item.id)
    player.inventory.append(item)
    ctx.log.add(f"You picked up a {item.name}!", "item")
    logger.debug("Player picked up entity %d (%s)", item.id, item.name)
    return True


def use_item(index: int, ctx: TurnContext) -> UseResult:
    """Apply the inventory item at *index*; used items are consumed."""
    inventory = ctx.store.player.inventory
    if not 0 <= index < len(inventory):
        ctx.log.add("You have no item in that slot.", "item")
        return UseResult.CANCELLED

    item = inventory[index]
    match item.item:
        case ItemKind.HEAL:
            result = _cast_heal(ctx)
        case ItemKind.LIGHTNING:
            result = _cast_lightning(ctx)
        case ItemKind.CONFUSE:
            result = _cast_confuse(ctx)
        case None:
            ctx.log.add(f"The {item.name} cannot be used.", "item")
            result = UseResult.CANCELLED
        case _:
            raise AssertionError(f"unhandled item kind {item.item!r}")

    if result == UseResult.USED:
        inventory.pop(index)
    return result


def closest_monster(ctx: TurnContext, max_range: int) -> Entity | None:
    """Closest living, visible non-player fighter within *max_range* (store order breaks ties)."""
    player = ctx.store.player
    best: Entity | None = None
    best_dist = float("inf")
    for e in ctx.store:
        if e.is_player or not e.alive or e.fighter is None:
            continue
        if not ctx.fov.is_in_fov(e.pos.x, e.pos.y):
            continue
        dist = player.distance_to(e)
        if dist <= max_range and dist < best_dist:
            best = e
            best_dist = dist
    return best


def _cast_heal(ctx: TurnContext) -> UseResult:
    fighter = ctx.store.player.fighter
    if fighter is None:
        return UseResult.CANCELLED
    if fighter.hp >= fighter.max_hp:
        ctx.log.add("You are already at full health.", "item")
        return UseResult.CANCELLED
    fighter.hp = min(fighter.hp + ctx.config.heal_amount, fighter.max_hp)
    ctx.log.add("Your wounds start to feel better!", "item")
    return UseResult.USED


def _cast_lightning(ctx: TurnContext) -> UseResult:
    target = closest_monster(ctx, ctx.config.lightning_range)
    if target is None:
        ctx.log.add("No enemy is close enough to strike.", "item")
        return UseResult.CANCELLED
    damage = ctx.config.lightning_damage
    ctx.log.add(
        f"A lightning bolt strikes the {target.name} with a loud thunder! "
        f"The damage is {damage} hit points.",
        "item",
    )
    xp = take_damage(target, damage, ctx.log)
    if xp is not None:
        gain_xp(ctx.store.player, xp, ctx)
    return UseResult.USED


def _cast_confuse(ctx: TurnContext) -> UseResult:
    target = closest_monster(ctx, ctx.config.confuse_range)
    if target is None:
        ctx.log.add("No enemy is close enough to confuse.", "item")
        return UseResult.CANCELLED
    target.ai = Ai(kind=AIKind.CONFUSED, previous=target.ai, turns=ctx.config.confuse_turns)
    ctx.log.add(f"The eyes of the {target.name} look vacant, as it starts to stumble around!", "item")
    return UseResult.USED
