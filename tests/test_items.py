"""Tests for picking up and using consumables."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tests.helpers.arena import DungeonArena
from delve.actions.items import closest_monster, pick_up, use_item
from delve.core.enums import AIKind, UseResult
from delve.engine.input import Action


class TestPickUp:
    def test_moves_item_from_floor_to_inventory(self):
        arena = DungeonArena(player_pos=(5, 5))
        potion = arena.add_item("healing_potion", (5, 5))
        assert pick_up(arena.ctx)
        assert potion not in arena.store
        assert [i.id for i in arena.player.inventory] == [potion]
        assert "You picked up a healing potion!" in arena.messages()

    def test_nothing_here(self):
        arena = DungeonArena()
        assert not pick_up(arena.ctx)
        assert "There is nothing here to pick up." in arena.messages()

    def test_first_item_in_store_order_wins(self):
        arena = DungeonArena(player_pos=(5, 5))
        first = arena.add_item("scroll_of_confusion", (5, 5))
        second = arena.add_item("healing_potion", (5, 5))
        pick_up(arena.ctx)
        assert arena.player.inventory[0].id == first
        assert second in arena.store

    def test_full_inventory(self):
        arena = DungeonArena(player_pos=(5, 5), inventory_size=2)
        arena.give_item("healing_potion")
        arena.give_item("healing_potion")
        scroll = arena.add_item("scroll_of_lightning", (5, 5))
        assert not pick_up(arena.ctx)
        assert scroll in arena.store
        assert len(arena.player.inventory) == 2
        assert "Your inventory is full, cannot pick up scroll of lightning bolt." in arena.messages()

    def test_pick_up_is_free(self):
        arena = DungeonArena(player_pos=(5, 5))
        arena.add_item("healing_potion", (5, 5))
        arena.step(Action.pick_up())
        assert arena.session.controller.monster_passes == 0
        assert len(arena.player.inventory) == 1


class TestHeal:
    def test_heals_up_to_max(self):
        arena = DungeonArena()
        arena.give_item("healing_potion")
        arena.set_player(hp=80)
        assert use_item(0, arena.ctx) == UseResult.USED
        assert arena.player.fighter.hp == 100
        assert arena.player.inventory == []

    def test_heal_amount(self):
        arena = DungeonArena()
        arena.give_item("healing_potion")
        arena.set_player(hp=10)
        use_item(0, arena.ctx)
        assert arena.player.fighter.hp == 50

    def test_cancelled_at_full_health(self):
        arena = DungeonArena()
        arena.give_item("healing_potion")
        assert use_item(0, arena.ctx) == UseResult.CANCELLED
        assert len(arena.player.inventory) == 1
        assert "You are already at full health." in arena.messages()


class TestLightning:
    def test_strikes_closest_monster(self):
        arena = DungeonArena(player_pos=(5, 5))
        near = arena.add_monster("troll", (7, 5), hp=50, max_hp=50)
        far = arena.add_monster("troll", (9, 5), hp=50, max_hp=50)
        arena.give_item("scroll_of_lightning")
        assert use_item(0, arena.ctx) == UseResult.USED
        assert arena.entity(near).fighter.hp == 10
        assert arena.entity(far).fighter.hp == 50
        assert arena.player.inventory == []

    def test_kill_awards_xp(self):
        arena = DungeonArena(player_pos=(5, 5))
        orc = arena.add_monster("orc", (7, 5))
        arena.give_item("scroll_of_lightning")
        use_item(0, arena.ctx)
        assert not arena.entity(orc).alive
        assert arena.player.fighter.xp == 35

    def test_out_of_range_is_cancelled(self):
        arena = DungeonArena(player_pos=(2, 5))
        orc = arena.add_monster("orc", (9, 5))
        arena.give_item("scroll_of_lightning")
        assert use_item(0, arena.ctx) == UseResult.CANCELLED
        assert arena.entity(orc).fighter.hp == 20
        assert len(arena.player.inventory) == 1

    def test_ignores_monsters_out_of_sight(self):
        arena = DungeonArena(player_pos=(5, 5))
        arena.walls((6, 4), (6, 5), (6, 6))
        arena.add_monster("orc", (8, 5))
        assert closest_monster(arena.ctx, 5) is None


class TestConfuse:
    def test_confuses_and_remembers_previous_ai(self):
        arena = DungeonArena(player_pos=(5, 5))
        orc = arena.add_monster("orc", (8, 5))
        arena.give_item("scroll_of_confusion")
        assert use_item(0, arena.ctx) == UseResult.USED
        ai = arena.entity(orc).ai
        assert ai.kind == AIKind.CONFUSED
        assert ai.turns == 10
        assert ai.previous.kind == AIKind.BASIC

    def test_no_target_is_cancelled(self):
        arena = DungeonArena()
        arena.give_item("scroll_of_confusion")
        assert use_item(0, arena.ctx) == UseResult.CANCELLED
        assert len(arena.player.inventory) == 1


class TestUseSlot:
    def test_empty_slot(self):
        arena = DungeonArena()
        assert use_item(3, arena.ctx) == UseResult.CANCELLED
        assert "You have no item in that slot." in arena.messages()

    def test_only_the_used_slot_is_consumed(self):
        arena = DungeonArena()
        arena.give_item("scroll_of_confusion")
        potion = arena.give_item("healing_potion")
        arena.set_player(hp=50)
        use_item(1, arena.ctx)
        assert [i.name for i in arena.player.inventory] == ["scroll of confusion"]
        assert potion not in arena.player.inventory
