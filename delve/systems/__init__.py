"""Engine systems: RNG, dungeon generation, spawning, field of view."""

from delve.systems.rng import DeterministicRNG, RandomStream
from delve.systems.fov import VisibilityEngine, compute_fov
from delve.systems.dungeon import DungeonGenerator
from delve.systems.spawner import SpawnTables

__all__ = [
    "DeterministicRNG",
    "DungeonGenerator",
    "RandomStream",
    "SpawnTables",
    "VisibilityEngine",
    "compute_fov",
]
