"""Grid-aware collision primitives for the player capsule-ish box."""
from __future__ import annotations

import math
from typing import Iterator, Sequence, Tuple

from panda3d.core import LPoint3

from game.components import PlayerState
from world.voxel_grid import WorldGrid

# Shrinks the footprint so standing flush against a wall is not a hit.
CORNER_EPSILON = 0.1
FEET_OFFSET = 0.1
TORSO_OFFSET = 1.0
HEAD_MARGIN = 0.1
# Vertical speed below which the player counts as resting.
REST_EPSILON = 0.001


def is_solid(world: WorldGrid, x: int, y: int, z: int) -> bool:
    return world.is_solid((x, y, z))


def sample_cells(pos: Sequence[float], radius: float, height: float) -> Iterator[Tuple[int, int, int]]:
    """Yield the voxel under each corner sample at the feet, torso and head bands."""
    px, py, pz = float(pos[0]), float(pos[1]), float(pos[2])
    r = radius - CORNER_EPSILON
    bands = (
        math.floor(py + FEET_OFFSET),
        math.floor(py + TORSO_OFFSET),
        math.floor(py + height - HEAD_MARGIN),
    )
    for cx, cz in ((px + r, pz + r), (px - r, pz + r), (px + r, pz - r), (px - r, pz - r)):
        bx = math.floor(cx)
        bz = math.floor(cz)
        for by in bands:
            yield bx, by, bz


def check_collision(world: WorldGrid, pos: Sequence[float], radius: float, height: float) -> bool:
    return any(world.is_solid(cell) for cell in sample_cells(pos, radius, height))


def resolve_horizontal(world: WorldGrid, player: PlayerState, dx: float, dz: float,
                       radius: float, height: float) -> Tuple[bool, bool]:
    """Apply ``dx`` then ``dz`` independently so the player slides along walls.

    Returns ``(moved_x, moved_z)``. A blocked axis keeps its old coordinate
    and has its velocity component zeroed.
    """
    pos = player.position
    moved_x = moved_z = False

    if dx:
        candidate = LPoint3(pos.x + dx, pos.y, pos.z)
        if check_collision(world, candidate, radius, height):
            player.velocity.x = 0.0
        else:
            pos.x = candidate.x
            moved_x = True

    if dz:
        candidate = LPoint3(pos.x, pos.y, pos.z + dz)
        if check_collision(world, candidate, radius, height):
            player.velocity.z = 0.0
        else:
            pos.z = candidate.z
            moved_z = True

    return moved_x, moved_z


def apply_gravity(player: PlayerState, gravity: float) -> None:
    player.velocity.y -= gravity


def integrate_vertical(world: WorldGrid, player: PlayerState) -> bool:
    """Move by the vertical velocity and clamp onto the block under the feet.

    This is a discrete correction rather than a sweep: a fall faster than one
    block per tick can pass through a floor. Returns True when clamped.
    """
    player.position.y += player.velocity.y

    pos = player.position
    fx, fy, fz = math.floor(pos.x), math.floor(pos.y), math.floor(pos.z)
    if player.velocity.y < 0 and is_solid(world, fx, fy, fz):
        pos.y = fy + 1
        player.velocity.y = 0.0
        return True
    return False


def can_jump(world: WorldGrid, player: PlayerState) -> bool:
    if abs(player.velocity.y) >= REST_EPSILON:
        return False
    pos = player.position
    below = (math.floor(pos.x), math.floor(pos.y) - 1, math.floor(pos.z))
    return world.is_solid(below) or float(pos.y) % 1 == 0
