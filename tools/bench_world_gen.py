"""Benchmark world generation and block picking."""
from __future__ import annotations

import argparse
import logging
import math
import sys
import time
from typing import List, Optional

from engine.config import get as engine_config_get
from game.raycast import cast
from game.transform import look_vector
from world.terrain import DEFAULT_SPAWN, generate


def _fan_directions(count: int) -> List[tuple]:
    """Evenly spread look directions over yaw, tilted downward toward terrain."""
    dirs = []
    for i in range(max(1, count)):
        yaw = (2.0 * math.pi * i) / max(1, count)
        pitch = -0.25 - 0.5 * (i % 4) / 4.0
        v = look_vector(yaw, pitch)
        dirs.append((v.x, v.y, v.z))
    return dirs


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=float, default=float(engine_config_get("world.seed", 1)))
    parser.add_argument("--radius", type=int, default=int(engine_config_get("world.radius", 30)))
    parser.add_argument("--casts", type=int, default=1000, help="raycasts to time from the spawn eye point")
    parser.add_argument("--reach", type=float, default=float(engine_config_get("physics.reach_distance", 5.0)))
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    t0 = time.perf_counter()
    grid = generate(args.seed, args.radius)
    gen_time = time.perf_counter() - t0

    spawn = engine_config_get("world.spawn", list(DEFAULT_SPAWN))
    eye = (float(spawn[0]), float(spawn[1]) + float(engine_config_get("physics.eye_height", 1.9)), float(spawn[2]))
    directions = _fan_directions(args.casts)

    hits = 0
    t_cast = time.perf_counter()
    for d in directions:
        if cast(eye, d, args.reach, grid) is not None:
            hits += 1
    cast_time = time.perf_counter() - t_cast

    mins, maxs = grid.bounds()
    print("Seed:", args.seed)
    print("Radius:", args.radius)
    print("Blocks:", len(grid))
    print("Bounds:", mins, maxs)
    print(f"Generate time: {gen_time:.3f} s")
    print(f"Raycasts: {len(directions)} ({hits} hits) in {cast_time * 1000.0:.2f} ms")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
