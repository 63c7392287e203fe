"""Deterministic terrain generation for the bounded sandbox disk."""
from __future__ import annotations

import logging
import math

from world.blocks import BlockType
from world.voxel_grid import WorldGrid

logger = logging.getLogger(__name__)

BOTTOM_Y = -5
NOISE_SCALE = 0.1
HEIGHT_AMPLITUDE = 10
HEIGHT_BASE = 2
DIRT_DEPTH = 2

SPAWN_PLATFORM_Y = 10
SPAWN_PLATFORM_HALF = 1

# Feet rest on top of the spawn platform.
DEFAULT_SPAWN = (0.0, float(SPAWN_PLATFORM_Y + 1), 0.0)


def lattice_hash(ix: int, iz: int) -> float:
    """Pseudo-random value in [0, 1) for an integer lattice point."""
    v = math.sin(ix * 12.9898 + iz * 78.233) * 43758.5453
    return v - math.floor(v)


def value_noise(x: float, z: float) -> float:
    """Bilinear interpolation of ``lattice_hash`` around ``(x, z)``."""
    x0 = math.floor(x)
    z0 = math.floor(z)
    fx = x - x0
    fz = z - z0

    s = lattice_hash(x0, z0)
    t = lattice_hash(x0 + 1, z0)
    u = lattice_hash(x0, z0 + 1)
    v = lattice_hash(x0 + 1, z0 + 1)

    near = s + (t - s) * fx
    far = u + (v - u) * fx
    return near + (far - near) * fz


def column_height(x: int, z: int, seed: float) -> int:
    n = value_noise(x * NOISE_SCALE + seed, z * NOISE_SCALE + seed)
    return int(math.floor(n * HEIGHT_AMPLITUDE)) + HEIGHT_BASE


def block_for_layer(y: int, height: int) -> BlockType:
    if y == height:
        return BlockType.GRASS
    if y >= height - DIRT_DEPTH:
        return BlockType.DIRT
    return BlockType.STONE


def generate(seed: float, radius: int) -> WorldGrid:
    """Build the world for ``(seed, radius)``.

    Identical arguments always produce an identical grid. Columns cover every
    integer ``|x|, |z| <= radius`` from ``BOTTOM_Y`` up to the noise height,
    then a 3x3 grass platform is stamped at ``SPAWN_PLATFORM_Y`` over the
    origin so the spawn point is always standable.
    """
    radius = int(radius)
    if radius < 0:
        raise ValueError("radius must be non-negative")

    grid = WorldGrid()
    for x in range(-radius, radius + 1):
        for z in range(-radius, radius + 1):
            height = column_height(x, z, seed)
            for y in range(BOTTOM_Y, height + 1):
                grid.set((x, y, z), block_for_layer(y, height))

    h = SPAWN_PLATFORM_HALF
    for x in range(-h, h + 1):
        for z in range(-h, h + 1):
            grid.set((x, SPAWN_PLATFORM_Y, z), BlockType.GRASS)

    logger.debug("generated world seed=%s radius=%d blocks=%d", seed, radius, len(grid))
    return grid
