"""Engine layer: session, turn controller, and input bindings."""

from delve.engine.input import Action, action_for_key
from delve.engine.session import GameSession
from delve.engine.turn_controller import TurnController

__all__ = ["Action", "GameSession", "TurnController", "action_for_key"]
