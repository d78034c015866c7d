#!/usr/bin/env python3
"""Level generation and FOV profiler.

Usage:
    python scripts/profile_generation.py --levels 50 --seed 42
    python scripts/profile_generation.py --levels 200 --cprofile gen.prof

Reports:
    - Per-level generation timing (min, p50, p95, max)
    - Full FOV recompute timing from every room center
    - Entity count per level
    - Optional: cProfile dump
"""

from __future__ import annotations

import argparse
import cProfile
import io
import os
import pstats
import statistics
import sys
import time

# Ensure project root is on path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from delve.config import DungeonConfig
from delve.core.enums import Domain
from delve.systems.dungeon import DungeonGenerator
from delve.systems.fov import compute_fov
from delve.systems.rng import DeterministicRNG


def _run(cfg: DungeonConfig, num_levels: int) -> dict:
    generator = DungeonGenerator(cfg)
    rng = DeterministicRNG(cfg.seed)

    gen_times: list[float] = []
    fov_times: list[float] = []
    entity_counts: list[int] = []

    for depth in range(1, num_levels + 1):
        t0 = time.perf_counter()
        level = generator.generate(
            cfg.map_width, cfg.map_height, cfg.max_rooms, depth,
            rng.stream(Domain.MAP_GEN, depth),
            spawn_rng=rng.stream(Domain.SPAWN, depth),
        )
        gen_times.append(time.perf_counter() - t0)
        entity_counts.append(len(level.entities))

        for room in level.rooms:
            t1 = time.perf_counter()
            compute_fov(level.grid, room.center, cfg.fov_radius, cfg.fov_light_walls, cfg.fov_subdivisions)
            fov_times.append(time.perf_counter() - t1)

    return {"gen_times": gen_times, "fov_times": fov_times, "entity_counts": entity_counts}


def _percentile(data: list[float], p: float) -> float:
    """Simple percentile calculation."""
    if not data:
        return 0.0
    sorted_data = sorted(data)
    k = (len(sorted_data) - 1) * (p / 100.0)
    f = int(k)
    c = f + 1
    if c >= len(sorted_data):
        return sorted_data[f]
    return sorted_data[f] + (k - f) * (sorted_data[c] - sorted_data[f])


def _print_timings(title: str, times: list[float]) -> None:
    print(f"\n  {title}")
    print(f"  {'Metric':<16} {'Time (ms)':>10}")
    print(f"  {'-' * 16} {'-' * 10}")
    print(f"  {'Min':<16} {min(times) * 1000:>10.3f}")
    print(f"  {'Mean':<16} {statistics.mean(times) * 1000:>10.3f}")
    print(f"  {'P50 (median)':<16} {_percentile(times, 50) * 1000:>10.3f}")
    print(f"  {'P95':<16} {_percentile(times, 95) * 1000:>10.3f}")
    print(f"  {'Max':<16} {max(times) * 1000:>10.3f}")


def _print_report(data: dict, wall_time: float) -> None:
    gen_times = data["gen_times"]
    if not gen_times:
        print("No levels generated.")
        return

    print("\n" + "=" * 70)
    print("  GENERATION PERFORMANCE REPORT")
    print("=" * 70)
    print(f"\n  Levels generated:  {len(gen_times)}")
    print(f"  Wall clock time:   {wall_time:.3f}s")
    print(f"  Entities / level:  min {min(data['entity_counts'])}, max {max(data['entity_counts'])}")

    _print_timings("Level generation", gen_times)
    if data["fov_times"]:
        _print_timings(f"FOV recompute ({len(data['fov_times'])} samples)", data["fov_times"])
    print("\n" + "=" * 70)


def main() -> None:
    parser = argparse.ArgumentParser(description="Profile dungeon generation and FOV")
    parser.add_argument("--levels", type=int, default=50, help="Number of levels (depths 1..N)")
    parser.add_argument("--seed", type=int, default=42, help="Dungeon seed")
    parser.add_argument("--width", type=int, default=80)
    parser.add_argument("--height", type=int, default=43)
    parser.add_argument("--cprofile", type=str, default=None, help="Save cProfile output to file")
    args = parser.parse_args()

    cfg = DungeonConfig(seed=args.seed, map_width=args.width, map_height=args.height)
    print(f"Profiling: {args.levels} levels, seed={args.seed}, map={args.width}x{args.height}")

    profiler = None
    if args.cprofile:
        profiler = cProfile.Profile()
        profiler.enable()

    wall_start = time.perf_counter()
    data = _run(cfg, args.levels)
    wall_time = time.perf_counter() - wall_start

    if profiler:
        profiler.disable()

    _print_report(data, wall_time)

    if profiler and args.cprofile:
        profiler.dump_stats(args.cprofile)
        print(f"\n  cProfile data saved to: {args.cprofile}")
        print(f"  View with: python -m pstats {args.cprofile}")

        print(f"\n  Top 20 functions by cumulative time:")
        stream = io.StringIO()
        ps = pstats.Stats(profiler, stream=stream)
        ps.sort_stats("cumulative")
        ps.print_stats(20)
        print(stream.getvalue())


if __name__ == "__main__":
    main()
