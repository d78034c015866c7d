"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DungeonConfig:
    """Immutable configuration passed to generation and turn resolution."""

    # World
    seed: int = 42
    map_width: int = 80
    map_height: int = 43

    # Rooms
    room_min_size: int = 6
    room_max_size: int = 10
    max_rooms: int = 30
    room_placement_attempts: int = 3     # samples per room before it is skipped
    room_margin: int = 0                 # extra spacing on top of the no-shared-wall rule

    # Field of view
    fov_radius: int = 10
    fov_light_walls: bool = True
    fov_subdivisions: int = 4            # ray samples per tile of distance

    # Player template
    player_name: str = "player"
    player_hp: int = 100
    player_defense: int = 1
    player_power: int = 4

    # Character level: next level costs base + level * factor XP
    level_up_base: int = 200
    level_up_factor: int = 150
    level_up_hp: int = 20

    # Spawning: (threshold_level, value) progressions, sorted by threshold
    max_room_monsters: tuple[tuple[int, int], ...] = ((1, 2), (4, 3), (6, 5))
    max_room_items: tuple[tuple[int, int], ...] = ((1, 1), (4, 2))
    # (kind, progression of weights)
    monster_chances: tuple[tuple[str, tuple[tuple[int, int], ...]], ...] = (
        ("orc", ((1, 80),)),
        ("troll", ((3, 15), (5, 30), (7, 60))),
    )
    item_chances: tuple[tuple[str, tuple[tuple[int, int], ...]], ...] = (
        ("healing_potion", ((1, 35),)),
        ("scroll_of_lightning", ((4, 25),)),
        ("scroll_of_confusion", ((2, 10),)),
    )

    # Items
    inventory_size: int = 26
    heal_amount: int = 40
    lightning_damage: int = 40
    lightning_range: int = 5
    confuse_range: int = 8
    confuse_turns: int = 10

    # Messages
    max_messages: int = 100

    # Logging
    log_level: str = "INFO"
