"""Exception types raised by the engine.

Per-turn outcomes (blocked moves, missing targets, cancelled items) are
never exceptions; these are reserved for setup failures and defects.
"""

from __future__ import annotations


class ConstructionError(ValueError):
    """Invalid parameters detected while building a level or a table."""


class InvariantViolation(RuntimeError):
    """The entity store or grid reached a state that correct code cannot produce."""
