"""Tests for progression tables, weighted selection and the RNG lanes."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from delve.config import DungeonConfig
from delve.core.enums import Domain
from delve.core.errors import ConstructionError
from delve.engine.session import GameSession
from delve.systems.rng import DeterministicRNG
from delve.systems.spawner import SpawnTables
from delve.systems.tables import (
    ProgressionTable,
    WeightedTable,
    chance_tables,
    from_dungeon_level,
    level_weighted_table,
    weighted_choice,
)

CFG = DungeonConfig()


class TestFromDungeonLevel:
    def test_zero_below_lowest_threshold(self):
        assert from_dungeon_level(((3, 15), (5, 30), (7, 60)), 2) == 0
        assert from_dungeon_level(((1, 2),), 0) == 0

    def test_highest_reached_threshold_wins(self):
        table = CFG.max_room_monsters
        assert from_dungeon_level(table, 1) == 2
        assert from_dungeon_level(table, 3) == 2
        assert from_dungeon_level(table, 4) == 3
        assert from_dungeon_level(table, 6) == 5
        assert from_dungeon_level(table, 50) == 5

    @pytest.mark.parametrize("table", [
        ((1, 2), (4, 3), (6, 5)),
        ((3, 15), (5, 30), (7, 60)),
        ((1, 1), (4, 2)),
    ])
    def test_monotonic_for_non_decreasing_values(self, table):
        values = [from_dungeon_level(table, level) for level in range(0, 15)]
        assert values == sorted(values)

    def test_empty_table_is_zero(self):
        assert from_dungeon_level((), 10) == 0


class TestProgressionTable:
    def test_unsorted_is_a_construction_error(self):
        with pytest.raises(ConstructionError):
            ProgressionTable.of((5, 1), (2, 3))

    def test_at_matches_free_function(self):
        table = ProgressionTable.of((3, 15), (5, 30), (7, 60))
        for level in range(10):
            assert table.at(level) == from_dungeon_level(table.entries, level)


class TestSpawnTables:
    def test_caps_follow_config(self):
        tables = SpawnTables(CFG)
        assert [tables.max_monsters(lvl) for lvl in (1, 4, 7)] == [2, 3, 5]
        assert [tables.max_items(lvl) for lvl in (1, 4)] == [1, 2]

    def test_unsorted_cap_table_rejected_at_setup(self):
        cfg = DungeonConfig(max_room_monsters=((6, 5), (1, 2)))
        with pytest.raises(ConstructionError):
            SpawnTables(cfg)
        with pytest.raises(ConstructionError):
            GameSession(cfg)

    def test_unsorted_weight_progression_rejected(self):
        cfg = DungeonConfig(monster_chances=(("orc", ((1, 80),)), ("troll", ((7, 60), (3, 15)))))
        with pytest.raises(ConstructionError):
            SpawnTables(cfg)

    def test_unsorted_item_cap_rejected(self):
        with pytest.raises(ConstructionError):
            SpawnTables(DungeonConfig(max_room_items=((4, 2), (1, 1))))


class TestWeightedTable:
    def test_zero_total_rejected(self):
        with pytest.raises(ConstructionError):
            WeightedTable.from_pairs([(0, "orc"), (0, "troll")])

    def test_empty_rejected(self):
        with pytest.raises(ConstructionError):
            WeightedTable.from_pairs([])

    def test_negative_weight_rejected(self):
        with pytest.raises(ConstructionError):
            WeightedTable.from_pairs([(10, "orc"), (-1, "troll")])

    def test_zero_weight_entry_never_chosen(self):
        table = WeightedTable.from_pairs([(0, "troll"), (5, "orc")])
        rng = DeterministicRNG(3).stream(Domain.SPAWN)
        assert {weighted_choice(table, rng) for _ in range(500)} == {"orc"}

    def test_distribution_follows_weights(self):
        table = WeightedTable.from_pairs([(80, "orc"), (20, "troll")])
        rng = DeterministicRNG(7).stream(Domain.SPAWN)
        n = 10_000
        orcs = sum(1 for _ in range(n) if table.choose(rng) == "orc")
        assert 0.77 < orcs / n < 0.83

    def test_level_weighted_table_at_depth_one_is_all_orcs(self):
        table = level_weighted_table(chance_tables(CFG.monster_chances), 1)
        assert table.entries == ((80, "orc"), (0, "troll"))

    def test_trolls_grow_more_likely_with_depth(self):
        weights = [dict((v, w) for w, v in level_weighted_table(chance_tables(CFG.monster_chances), lvl).entries)["troll"]
                   for lvl in (1, 3, 5, 7)]
        assert weights == [0, 15, 30, 60]


class TestDeterministicRNG:
    def test_same_seed_same_sequence(self):
        a = DeterministicRNG(99).stream(Domain.MAP_GEN, 1)
        b = DeterministicRNG(99).stream(Domain.MAP_GEN, 1)
        assert [a.randrange(0, 1000) for _ in range(50)] == [b.randrange(0, 1000) for _ in range(50)]

    def test_domains_are_independent(self):
        rng = DeterministicRNG(99)
        a = rng.stream(Domain.MAP_GEN)
        b = rng.stream(Domain.SPAWN)
        assert [a.randrange(0, 1 << 30) for _ in range(5)] != [b.randrange(0, 1 << 30) for _ in range(5)]

    def test_ranges(self):
        stream = DeterministicRNG(5).stream(Domain.AI_DECISION)
        for _ in range(1000):
            f = stream.random()
            assert 0.0 <= f < 1.0
            assert -1 <= stream.randrange(-1, 2) <= 1
        assert stream.draws == 2000

    def test_empty_range_raises(self):
        with pytest.raises(ValueError):
            DeterministicRNG(5).stream(Domain.SPAWN).randrange(3, 3)
