"""Combat — directional move-or-attack, damage, and death handling.

Damage is ``max(power - defense, 0)``. A fighter reduced to 0 HP or less
stops being alive and stops blocking, but stays in the store at its last
position so it can still be drawn and inspected. Only living entities with
combat stats are valid attack targets; a corpse underfoot is walked over.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from delve.actions.movement import move_entity
from delve.core.enums import DeathCallback, MoveOutcome

if TYPE_CHECKING:
    from delve.core.context import TurnContext
    from delve.core.messages import MessageLog
    from delve.core.models import Entity

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AttackResult:
    """What one attack did."""

    attacker_id: int
    target_id: int
    damage: int
    killed: bool


def display_name(entity: Entity) -> str:
    return entity.name[:1].upper() + entity.name[1:]


def take_damage(target: Entity, damage: int, log: MessageLog) -> int | None:
    """Apply *damage*; if it kills, run the death callback and return the XP it is worth."""
    fighter = target.fighter
    if fighter is None:
        return None
    if damage > 0:
        fighter.hp -= damage
    if fighter.hp <= 0 and target.alive:
        xp = fighter.xp
        _die(target, log)
        return xp
    return None


def attack(attacker_id: int, target_id: int, ctx: TurnContext) -> AttackResult:
    """Resolve one melee attack between two entities in the store."""
    attacker = ctx.store[attacker_id]
    target = ctx.store[target_id]
    if attacker.fighter is None or target.fighter is None or not target.alive:
        return AttackResult(attacker_id, target_id, 0, False)

    damage = max(attacker.fighter.power - target.fighter.defense, 0)
    if damage > 0:
        ctx.log.add(
            f"{display_name(attacker)} attacks {target.name} for {damage} hit points.",
            "combat",
        )
    else:
        ctx.log.add(f"{display_name(attacker)} attacks {target.name} but it has no effect!", "combat")

    name_before = target.name
    xp = take_damage(target, damage, ctx.log)
    killed = xp is not None
    logger.debug(
        "Entity %d (%s) hits entity %d (%s) for %d [HP: %d/%d]",
        attacker.id, attacker.name, target.id, name_before, damage,
        max(target.fighter.hp, 0), target.fighter.max_hp,
    )
    if killed:
        gain_xp(attacker, xp, ctx)
    return AttackResult(attacker_id, target_id, damage, killed)


def xp_to_next_level(level: int, base: int, factor: int) -> int:
    return base + level * factor


def gain_xp(entity: Entity, xp: int, ctx: TurnContext) -> int:
    """Credit *xp* to *entity*; the player levels up for every threshold crossed.

    Each level spends its threshold from the XP pool and adds
    ``level_up_hp`` to both max and current HP. Returns the levels gained.
    """
    fighter = entity.fighter
    if fighter is None:
        return 0
    fighter.xp += xp
    if not entity.is_player:
        return 0
    ctx.log.add(f"You gain {xp} experience points.", "combat")

    cfg = ctx.config
    gained = 0
    needed = xp_to_next_level(entity.level, cfg.level_up_base, cfg.level_up_factor)
    while fighter.xp >= needed:
        fighter.xp -= needed
        entity.level += 1
        fighter.max_hp += cfg.level_up_hp
        fighter.hp += cfg.level_up_hp
        gained += 1
        ctx.log.add(f"Your battle skills grow stronger! You reached level {entity.level}!", "level")
        logger.info("Player reached level %d (max HP %d)", entity.level, fighter.max_hp)
        needed = xp_to_next_level(entity.level, cfg.level_up_base, cfg.level_up_factor)
    return gained


def move_or_attack(entity_id: int, dx: int, dy: int, ctx: TurnContext) -> MoveOutcome:
    """Attack whatever lives at the destination, otherwise try to move there."""
    entity = ctx.store[entity_id]
    x = entity.pos.x + dx
    y = entity.pos.y + dy
    target = ctx.store.living_fighter_at(x, y, exclude=entity_id)
    if target is not None:
        attack(entity_id, target.id, ctx)
        return MoveOutcome.ATTACKED
    if move_entity(entity_id, dx, dy, ctx.grid, ctx.store):
        return MoveOutcome.MOVED
    return MoveOutcome.BLOCKED


# ---------------------------------------------------------------------------
# Death callbacks
# ---------------------------------------------------------------------------

def _die(entity: Entity, log: MessageLog) -> None:
    entity.alive = False
    entity.blocks = False
    callback = entity.fighter.on_death if entity.fighter else DeathCallback.MONSTER
    match callback:
        case DeathCallback.PLAYER:
            _player_death(entity, log)
        case DeathCallback.MONSTER:
            _monster_death(entity, log)
        case _:
            raise AssertionError(f"unhandled death callback {callback!r}")


def _player_death(player: Entity, log: MessageLog) -> None:
    log.add("You died!", "death")
    player.glyph = "%"
    logger.info("Player died at %s", player.pos)


def _monster_death(monster: Entity, log: MessageLog) -> None:
    log.add(f"{display_name(monster)} is dead!", "death")
    monster.glyph = "%"
    monster.ai = None
    monster.name = f"remains of {monster.name}"
    logger.info("Entity %d died at %s", monster.id, monster.pos)
