"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class ActionKind(IntEnum):
    """Abstract actions produced by the input surface."""

    MOVE = 0            # also covers attack-in-direction
    TOGGLE_DISPLAY = 1
    QUIT = 2
    PICK_UP = 3
    USE_ITEM = 4
    DESCEND = 5
    IGNORED = 6


@unique
class PlayerAction(IntEnum):
    """Classification of a handled input — decides whether monsters act."""

    TOOK_TURN = 0
    DIDNT_TAKE_TURN = 1
    EXIT = 2


@unique
class TurnState(IntEnum):
    """States of the turn controller."""

    AWAITING_INPUT = 0
    RESOLVING_PLAYER_ACTION = 1
    RESOLVING_MONSTER_TURNS = 2
    TERMINATED = 3


@unique
class Advance(IntEnum):
    """Result of driving the controller one step."""

    CONTINUE_PLAYING = 0
    EXITED = 1


@unique
class MoveOutcome(IntEnum):
    """What a directional action ended up doing."""

    ATTACKED = 0
    MOVED = 1
    BLOCKED = 2


@unique
class DeathCallback(IntEnum):
    """Which death handler runs when a fighter drops to 0 HP."""

    PLAYER = 0
    MONSTER = 1


@unique
class AIKind(IntEnum):
    """Monster behaviours."""

    BASIC = 0
    CONFUSED = 1


@unique
class ItemKind(IntEnum):
    """Consumable item effects."""

    HEAL = 0
    LIGHTNING = 1
    CONFUSE = 2


@unique
class UseResult(IntEnum):
    """Outcome of using an inventory item."""

    USED = 0
    CANCELLED = 1


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    MAP_GEN = 0
    SPAWN = 1
    AI_DECISION = 2
