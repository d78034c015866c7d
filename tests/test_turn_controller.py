"""Tests for the turn state machine and input classification."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tests.helpers.arena import DungeonArena
from delve.core.enums import Advance, PlayerAction, TurnState
from delve.core.models import Vector2
from delve.engine.input import Action, action_for_key


class TestClassification:
    def test_move_takes_a_turn(self):
        arena = DungeonArena()
        assert arena.session.controller.handle(Action.move(1, 0), arena.ctx) == PlayerAction.TOOK_TURN

    def test_blocked_move_still_takes_a_turn(self):
        arena = DungeonArena(player_pos=(1, 1))
        assert arena.session.controller.handle(Action.move(-1, 0), arena.ctx) == PlayerAction.TOOK_TURN

    def test_free_actions(self):
        arena = DungeonArena()
        controller = arena.session.controller
        for action in (Action.toggle_display(), Action.ignored(), Action.pick_up(),
                       Action.use_item(0), Action.descend()):
            assert controller.handle(action, arena.ctx) == PlayerAction.DIDNT_TAKE_TURN

    def test_quit_exits(self):
        arena = DungeonArena()
        assert arena.session.controller.handle(Action.quit(), arena.ctx) == PlayerAction.EXIT

    def test_dead_player_cannot_act_but_can_quit(self):
        arena = DungeonArena()
        arena.player.alive = False
        controller = arena.session.controller
        assert controller.handle(Action.move(1, 0), arena.ctx) == PlayerAction.DIDNT_TAKE_TURN
        assert arena.player.pos == Vector2(5, 5)
        assert controller.handle(Action.quit(), arena.ctx) == PlayerAction.EXIT


class TestAdvance:
    def test_toggle_then_move_runs_exactly_one_monster_pass(self):
        arena = DungeonArena()
        arena.add_monster("orc", (15, 8))
        controller = arena.session.controller

        assert arena.step(Action.toggle_display()) == Advance.CONTINUE_PLAYING
        assert controller.monster_passes == 0
        assert controller.turn == 0
        assert arena.session.fullscreen

        assert arena.step(Action.move(1, 0)) == Advance.CONTINUE_PLAYING
        assert controller.monster_passes == 1
        assert controller.turn == 1
        assert controller.state == TurnState.AWAITING_INPUT

    def test_ignored_key_changes_nothing(self):
        arena = DungeonArena()
        orc = arena.add_monster("orc", (7, 5))
        arena.step(action_for_key("f12"))
        assert arena.session.controller.monster_passes == 0
        assert arena.entity(orc).pos == Vector2(7, 5)
        assert arena.player.fighter.hp == arena.player.fighter.max_hp

    def test_quit_terminates(self):
        arena = DungeonArena()
        assert arena.step(Action.quit()) == Advance.EXITED
        assert arena.session.controller.state == TurnState.TERMINATED

    def test_terminated_controller_stays_exited(self):
        arena = DungeonArena()
        arena.step(Action.quit())
        assert arena.step(Action.move(1, 0)) == Advance.EXITED
        assert arena.player.pos == Vector2(5, 5)
        assert arena.session.controller.monster_passes == 0

    def test_quit_while_dead_terminates(self):
        arena = DungeonArena()
        arena.player.alive = False
        assert arena.step(Action.quit()) == Advance.EXITED

    def test_dead_player_freezes_the_world(self):
        arena = DungeonArena()
        orc = arena.add_monster("orc", (9, 5))
        arena.player.alive = False
        arena.step(Action.move(1, 0))
        assert arena.session.controller.monster_passes == 0
        assert arena.entity(orc).pos == Vector2(9, 5)

    def test_free_actions_leave_the_view_alone(self):
        arena = DungeonArena()
        fov = arena.session.fov
        before = fov.computations
        for action in (Action.toggle_display(), Action.ignored(), Action.pick_up(), Action.descend()):
            arena.step(action)
        assert fov.computations == before

    def test_fov_follows_the_player(self):
        arena = DungeonArena(player_pos=(3, 5), fov_radius=3)
        assert not arena.session.is_in_fov(7, 5)
        arena.step(Action.move(1, 0))
        assert arena.session.is_in_fov(7, 5)


class TestMonsterPass:
    def test_later_monsters_see_earlier_moves(self):
        arena = DungeonArena(player_pos=(2, 5))
        first = arena.add_monster("orc", (4, 5))
        second = arena.add_monster("orc", (5, 5))
        arena.step(Action.move(0, 0))
        assert arena.entity(first).pos == Vector2(3, 5)
        # (4, 5) was only free because the first orc already left it
        assert arena.entity(second).pos == Vector2(4, 5)

    def test_store_order_decides_who_moves_first(self):
        arena = DungeonArena(player_pos=(2, 5))
        back = arena.add_monster("orc", (5, 5))
        front = arena.add_monster("orc", (4, 5))
        arena.step(Action.move(0, 0))
        assert arena.entity(back).pos == Vector2(5, 5)
        assert arena.entity(front).pos == Vector2(3, 5)

    def test_dead_monsters_and_items_do_not_act(self):
        arena = DungeonArena(player_pos=(5, 5))
        orc = arena.add_monster("orc", (7, 5), hp=0)
        arena.entity(orc).alive = False
        arena.entity(orc).blocks = False
        arena.add_item("healing_potion", (8, 5))
        arena.step(Action.move(0, 1))
        assert arena.entity(orc).pos == Vector2(7, 5)
        assert arena.player.fighter.hp == arena.player.fighter.max_hp

    def test_adjacent_orc_attacks_once_per_turn(self):
        arena = DungeonArena(player_pos=(5, 5))
        arena.set_player(defense=0)
        arena.add_monster("orc", (6, 5))
        arena.step(Action.move(0, 0))
        assert arena.player.fighter.hp == 96
        arena.step(Action.move(0, 0))
        assert arena.player.fighter.hp == 92
