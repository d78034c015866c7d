"""Action resolvers: movement, melee combat, and item use."""

from delve.actions.movement import is_blocked, move_entity, move_towards
from delve.actions.combat import attack, move_or_attack
from delve.actions.items import pick_up, use_item

__all__ = ["attack", "is_blocked", "move_entity", "move_or_attack", "move_towards", "pick_up", "use_item"]
