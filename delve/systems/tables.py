"""Depth-dependent scalar tables and weighted selection.

Two small structures drive all population decisions:

* ``ProgressionTable`` — ``(threshold_level, value)`` pairs sorted by
  threshold; ``from_dungeon_level`` returns the value of the deepest
  threshold the current level has reached.
* ``WeightedTable`` — ``(weight, value)`` pairs; ``weighted_choice`` picks a
  value with probability proportional to its weight.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Iterable, Sequence, TypeVar

from delve.core.errors import ConstructionError

if TYPE_CHECKING:
    from delve.systems.rng import RandomStream

T = TypeVar("T")


def from_dungeon_level(table: Sequence[tuple[int, int]], level: int) -> int:
    """Return the value of the highest threshold <= *level*, or 0.

    *table* must already be sorted ascending by threshold.
    """
    for threshold, value in reversed(table):
        if level >= threshold:
            return value
    return 0


@dataclass(frozen=True, slots=True)
class ProgressionTable:
    """Immutable, validated ``(threshold_level, value)`` sequence."""

    entries: tuple[tuple[int, int], ...]

    def __post_init__(self) -> None:
        thresholds = [t for t, _ in self.entries]
        if thresholds != sorted(thresholds):
            raise ConstructionError(f"progression table not sorted by threshold: {self.entries}")

    @classmethod
    def of(cls, *entries: tuple[int, int]) -> ProgressionTable:
        return cls(tuple(entries))

    def at(self, level: int) -> int:
        return from_dungeon_level(self.entries, level)


@dataclass(frozen=True, slots=True)
class WeightedTable(Generic[T]):
    """Immutable ``(weight, value)`` sequence with a positive total weight."""

    entries: tuple[tuple[int, T], ...]

    def __post_init__(self) -> None:
        for weight, value in self.entries:
            if weight < 0:
                raise ConstructionError(f"negative weight {weight} for {value!r}")
        if self.total <= 0:
            raise ConstructionError("weighted table has zero total weight")

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, T]]) -> WeightedTable[T]:
        return cls(tuple(pairs))

    @property
    def total(self) -> int:
        return sum(w for w, _ in self.entries)

    def choose(self, rng: RandomStream) -> T:
        return weighted_choice(self, rng)


def weighted_choice(table: WeightedTable[T], rng: RandomStream) -> T:
    """Draw uniformly in [0, total) and return the value owning that slot."""
    draw = rng.randrange(0, table.total)
    running = 0
    for weight, value in table.entries:
        running += weight
        if draw < running:
            return value
    # draw < total always lands inside some interval
    raise AssertionError("unreachable: draw outside cumulative weight range")


def chance_tables(
    chances: Iterable[tuple[T, Sequence[tuple[int, int]]]],
) -> tuple[tuple[T, ProgressionTable], ...]:
    """Validate raw ``(value, progression)`` config pairs into ProgressionTables."""
    return tuple((value, ProgressionTable(tuple(progression))) for value, progression in chances)


def level_weighted_table(
    chances: Iterable[tuple[T, ProgressionTable]],
    level: int,
) -> WeightedTable[T]:
    """Build a WeightedTable whose per-value weights come from progression tables."""
    return WeightedTable.from_pairs((progression.at(level), value) for value, progression in chances)
