"""TurnController — the player-turn / monster-turn state machine.

One call to ``advance`` drives a full cycle:
  AWAITING_INPUT → RESOLVING_PLAYER_ACTION
    → (TOOK_TURN)       RESOLVING_MONSTER_TURNS → AWAITING_INPUT
    → (DIDNT_TAKE_TURN) AWAITING_INPUT
    → (EXIT)            TERMINATED

Only a turn-taking action lets monsters act, so toggling the display or
picking something up is free.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from delve.actions.combat import move_or_attack
from delve.actions.items import pick_up, use_item
from delve.ai.monsters import take_turn
from delve.core.enums import ActionKind, Advance, PlayerAction, TurnState
from delve.core.models import PLAYER_ID

if TYPE_CHECKING:
    from delve.core.context import TurnContext
    from delve.engine.input import Action
    from delve.engine.session import GameSession

logger = logging.getLogger(__name__)


class TurnController:
    """Classifies player input and runs the monster pass when a turn is spent."""

    __slots__ = ("_session", "_state", "_turn", "_monster_passes")

    def __init__(self, session: GameSession) -> None:
        self._session = session
        self._state: TurnState = TurnState.AWAITING_INPUT
        self._turn: int = 0
        self._monster_passes: int = 0

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def turn(self) -> int:
        """Number of turn-taking player actions resolved so far."""
        return self._turn

    @property
    def monster_passes(self) -> int:
        return self._monster_passes

    @property
    def terminated(self) -> bool:
        return self._state == TurnState.TERMINATED

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------

    def advance(self, action: Action) -> Advance:
        """Resolve one input; a terminated controller stays exited."""
        if self._state == TurnState.TERMINATED:
            return Advance.EXITED

        self._state = TurnState.RESOLVING_PLAYER_ACTION
        ctx = self._session.context
        ctx.log.turn = self._turn

        result = self.handle(action, ctx)

        match result:
            case PlayerAction.EXIT:
                self._state = TurnState.TERMINATED
                logger.info("Session terminated after %d turns", self._turn)
                return Advance.EXITED
            case PlayerAction.TOOK_TURN:
                self._turn += 1
                self._session.refresh_fov()
                self._state = TurnState.RESOLVING_MONSTER_TURNS
                self._run_monster_pass(self._session.context)
            case PlayerAction.DIDNT_TAKE_TURN:
                # free actions never move the player; descend refreshes its own view
                pass
            case _:
                raise AssertionError(f"unreachable player action {result!r}")

        self._state = TurnState.AWAITING_INPUT
        return Advance.CONTINUE_PLAYING

    def handle(self, action: Action, ctx: TurnContext) -> PlayerAction:
        """Execute the player's part of *action* and classify it."""
        if action.kind == ActionKind.QUIT:
            return PlayerAction.EXIT
        if not ctx.store.player.alive:
            return PlayerAction.DIDNT_TAKE_TURN

        match action.kind:
            case ActionKind.MOVE:
                move_or_attack(PLAYER_ID, action.dx, action.dy, ctx)
                return PlayerAction.TOOK_TURN
            case ActionKind.TOGGLE_DISPLAY:
                self._session.toggle_display()
                return PlayerAction.DIDNT_TAKE_TURN
            case ActionKind.PICK_UP:
                pick_up(ctx)
                return PlayerAction.DIDNT_TAKE_TURN
            case ActionKind.USE_ITEM:
                use_item(action.index, ctx)
                return PlayerAction.DIDNT_TAKE_TURN
            case ActionKind.DESCEND:
                self._session.descend()
                return PlayerAction.DIDNT_TAKE_TURN
            case ActionKind.IGNORED:
                return PlayerAction.DIDNT_TAKE_TURN
            case _:
                raise AssertionError(f"unreachable action kind {action.kind!r}")

    def reset(self) -> None:
        self._state = TurnState.AWAITING_INPUT
        self._turn = 0
        self._monster_passes = 0

    # ------------------------------------------------------------------
    # Monster pass
    # ------------------------------------------------------------------

    def _run_monster_pass(self, ctx: TurnContext) -> None:
        """Every living non-player entity with AI acts once, in store order.

        Later actors see the effects of earlier ones. Ids are snapshotted so
        the pass is stable even if an action removes entities.
        """
        self._monster_passes += 1
        acted = 0
        for eid in ctx.store.ids():
            if eid == PLAYER_ID:
                continue
            entity = ctx.store.get(eid)
            if entity is None or not entity.alive or entity.ai is None:
                continue
            take_turn(eid, ctx)
            acted += 1
        logger.debug("Turn %d: %d monsters acted", self._turn, acted)
