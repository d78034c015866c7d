"""Tests for move-or-attack, damage, death callbacks and XP."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tests.helpers.arena import DungeonArena
from delve.actions.combat import attack, gain_xp, move_or_attack, xp_to_next_level
from delve.core.enums import MoveOutcome
from delve.core.models import Vector2
from delve.engine.input import Action


class TestAttack:
    def test_damage_is_power_minus_defense(self):
        arena = DungeonArena()
        troll = arena.add_monster("troll", (6, 5))
        result = attack(0, troll, arena.ctx)
        # player power 4 vs troll defense 2
        assert result.damage == 2
        assert arena.entity(troll).fighter.hp == 28

    def test_zero_damage_has_no_effect(self):
        arena = DungeonArena()
        troll = arena.add_monster("troll", (6, 5))
        arena.set_player(power=2)
        result = attack(0, troll, arena.ctx)
        assert result.damage == 0
        assert arena.entity(troll).fighter.hp == 30
        assert "Player attacks troll but it has no effect!" in arena.messages()

    def test_damage_never_heals(self):
        arena = DungeonArena()
        troll = arena.add_monster("troll", (6, 5), defense=10)
        attack(0, troll, arena.ctx)
        assert arena.entity(troll).fighter.hp == 30

    def test_kill_clears_alive_and_blocks_but_keeps_entity(self):
        arena = DungeonArena()
        orc = arena.add_monster("orc", (6, 5), hp=3)
        result = attack(0, orc, arena.ctx)
        corpse = arena.entity(orc)
        assert result.killed
        assert not corpse.alive and not corpse.blocks
        assert corpse.pos == Vector2(6, 5)
        assert corpse.fighter.hp <= 0
        assert orc in arena.store

    def test_monster_death_callback(self):
        arena = DungeonArena()
        orc = arena.add_monster("orc", (6, 5), hp=1)
        attack(0, orc, arena.ctx)
        corpse = arena.entity(orc)
        assert corpse.glyph == "%"
        assert corpse.ai is None
        assert corpse.name == "remains of orc"
        assert "Orc is dead!" in arena.messages()

    def test_player_gains_xp(self):
        arena = DungeonArena()
        orc = arena.add_monster("orc", (6, 5), hp=1)
        attack(0, orc, arena.ctx)
        assert arena.player.fighter.xp == 35
        assert "You gain 35 experience points." in arena.messages()

    def test_player_death_callback(self):
        arena = DungeonArena()
        troll = arena.add_monster("troll", (6, 5))
        arena.set_player(hp=5)
        attack(troll, 0, arena.ctx)
        player = arena.player
        assert not player.alive and not player.blocks
        assert player.glyph == "%"
        assert "You died!" in arena.messages()
        assert 0 in arena.store

    def test_corpse_is_not_a_target(self):
        arena = DungeonArena()
        orc = arena.add_monster("orc", (6, 5), hp=1)
        attack(0, orc, arena.ctx)
        hp_after_death = arena.entity(orc).fighter.hp
        logged = len(arena.session.log)

        result = attack(0, orc, arena.ctx)

        assert result.damage == 0 and not result.killed
        assert arena.entity(orc).fighter.hp == hp_after_death
        assert arena.player.fighter.xp == 35
        assert len(arena.session.log) == logged


class TestMoveOrAttack:
    def test_attacks_living_fighter(self):
        arena = DungeonArena()
        orc = arena.add_monster("orc", (6, 5))
        assert move_or_attack(0, 1, 0, arena.ctx) == MoveOutcome.ATTACKED
        assert arena.player.pos == Vector2(5, 5)
        assert arena.entity(orc).fighter.hp == 16

    def test_walks_over_corpse(self):
        arena = DungeonArena()
        orc = arena.add_monster("orc", (6, 5), hp=1)
        attack(0, orc, arena.ctx)
        assert move_or_attack(0, 1, 0, arena.ctx) == MoveOutcome.MOVED
        assert arena.player.pos == Vector2(6, 5)

    def test_walks_over_items(self):
        arena = DungeonArena()
        arena.add_item("healing_potion", (6, 5))
        assert move_or_attack(0, 1, 0, arena.ctx) == MoveOutcome.MOVED

    def test_live_fighter_behind_corpse_is_still_the_target(self):
        arena = DungeonArena()
        corpse = arena.add_monster("orc", (6, 5), hp=1)
        attack(0, corpse, arena.ctx)
        live = arena.add_monster("orc", (6, 5))
        assert move_or_attack(0, 1, 0, arena.ctx) == MoveOutcome.ATTACKED
        assert arena.entity(live).fighter.hp == 16

    def test_wall_is_blocked(self):
        arena = DungeonArena(player_pos=(1, 1))
        assert move_or_attack(0, -1, -1, arena.ctx) == MoveOutcome.BLOCKED


class TestOrcScenario:
    """One room, the player and one adjacent orc, driven through the turn loop."""

    def test_five_attacks_then_walk_onto_corpse(self):
        arena = DungeonArena(player_pos=(5, 5))
        arena.set_player(power=4, defense=0)
        orc = arena.add_monster("orc", (6, 5))

        arena.step(Action.move(1, 0))
        assert arena.entity(orc).fighter.hp == 16

        for _ in range(4):
            arena.step(Action.move(1, 0))
        corpse = arena.entity(orc)
        assert corpse.fighter.hp <= 0
        assert not corpse.alive and not corpse.blocks
        assert arena.player.pos == Vector2(5, 5)

        arena.step(Action.move(1, 0))
        assert arena.player.pos == Vector2(6, 5)
        assert arena.entity(orc).fighter.hp == 0
        assert arena.player.alive


class TestLevelUp:
    def test_threshold_grows_with_level(self):
        assert xp_to_next_level(1, 200, 150) == 350
        assert xp_to_next_level(2, 200, 150) == 500

    def test_kill_crossing_threshold_levels_up(self):
        arena = DungeonArena()
        arena.set_player(xp=330)
        orc = arena.add_monster("orc", (6, 5), hp=1)
        attack(0, orc, arena.ctx)
        player = arena.player
        assert player.level == 2
        assert player.fighter.xp == 15            # 330 + 35 - 350
        assert player.fighter.max_hp == 120
        assert player.fighter.hp == 120
        assert "Your battle skills grow stronger! You reached level 2!" in arena.messages()

    def test_below_threshold_keeps_level(self):
        arena = DungeonArena()
        orc = arena.add_monster("orc", (6, 5), hp=1)
        attack(0, orc, arena.ctx)
        assert arena.player.level == 1
        assert arena.player.fighter.max_hp == 100

    def test_large_gain_crosses_several_levels(self):
        arena = DungeonArena()
        assert gain_xp(arena.player, 1000, arena.ctx) == 2
        player = arena.player
        assert player.level == 3
        assert player.fighter.xp == 150           # 1000 - 350 - 500
        assert player.fighter.max_hp == 140

    def test_monsters_bank_xp_without_levelling(self):
        arena = DungeonArena()
        troll = arena.add_monster("troll", (6, 5))
        arena.set_player(hp=1)
        attack(troll, 0, arena.ctx)
        troll_entity = arena.entity(troll)
        assert troll_entity.level == 1
        assert troll_entity.fighter.xp == 100       # the player is worth 0 xp

    def test_lightning_kill_levels_up(self):
        arena = DungeonArena(player_pos=(5, 5))
        arena.set_player(xp=340)
        arena.add_monster("orc", (7, 5))
        arena.give_item("scroll_of_lightning")
        arena.step(Action.use_item(0))
        assert arena.player.level == 2
        assert arena.player.fighter.xp == 25
