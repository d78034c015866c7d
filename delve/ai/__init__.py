"""AI layer: per-kind monster behaviours."""

from delve.ai.monsters import MONSTER_HANDLERS, take_turn

__all__ = ["MONSTER_HANDLERS", "take_turn"]
