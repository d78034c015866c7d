"""Key name → Action mapping for the input surface.

Raw key events are translated by the presentation layer into plain key
names ("up", "k", "kp8", "g", ...). This module only maps those names to
abstract actions; unknown names become an ignored action.
"""

from __future__ import annotations

from dataclasses import dataclass

from delve.core.enums import ActionKind
from delve.core.models import DIRECTION_OFFSETS


@dataclass(frozen=True, slots=True)
class Action:
    """An abstract player intent handed to the turn controller."""

    kind: ActionKind
    dx: int = 0
    dy: int = 0
    index: int = -1

    @classmethod
    def move(cls, dx: int, dy: int) -> Action:
        return cls(ActionKind.MOVE, dx=dx, dy=dy)

    @classmethod
    def toggle_display(cls) -> Action:
        return cls(ActionKind.TOGGLE_DISPLAY)

    @classmethod
    def quit(cls) -> Action:
        return cls(ActionKind.QUIT)

    @classmethod
    def pick_up(cls) -> Action:
        return cls(ActionKind.PICK_UP)

    @classmethod
    def use_item(cls, index: int) -> Action:
        return cls(ActionKind.USE_ITEM, index=index)

    @classmethod
    def descend(cls) -> Action:
        return cls(ActionKind.DESCEND)

    @classmethod
    def ignored(cls) -> Action:
        return cls(ActionKind.IGNORED)


def _direction(name: str) -> Action:
    off = DIRECTION_OFFSETS[name]
    return Action.move(off.x, off.y)


# Arrow keys, vi keys and numpad share the same eight directions.
KEY_BINDINGS: dict[str, Action] = {
    # arrows
    "up": _direction("n"),
    "down": _direction("s"),
    "left": _direction("w"),
    "right": _direction("e"),
    "home": _direction("nw"),
    "pageup": _direction("ne"),
    "end": _direction("sw"),
    "pagedown": _direction("se"),
    # vi keys
    "k": _direction("n"),
    "j": _direction("s"),
    "h": _direction("w"),
    "l": _direction("e"),
    "y": _direction("nw"),
    "u": _direction("ne"),
    "b": _direction("sw"),
    "n": _direction("se"),
    # numpad
    "kp8": _direction("n"),
    "kp2": _direction("s"),
    "kp4": _direction("w"),
    "kp6": _direction("e"),
    "kp7": _direction("nw"),
    "kp9": _direction("ne"),
    "kp1": _direction("sw"),
    "kp3": _direction("se"),
    # commands
    "g": Action.pick_up(),
    ">": Action.descend(),
    "escape": Action.quit(),
    "alt+enter": Action.toggle_display(),
}

# Inventory slots 1-9
for _slot in range(1, 10):
    KEY_BINDINGS[str(_slot)] = Action.use_item(_slot - 1)
del _slot


def action_for_key(name: str) -> Action:
    """Translate a key name; unknown keys map to an ignored action."""
    return KEY_BINDINGS.get(name.lower(), Action.ignored())
