"""Voxel picking via 3D DDA grid traversal."""
from __future__ import annotations

import math
from typing import Iterator, Optional, Sequence, Tuple

from game.components import Coord, RaycastHit
from world.voxel_grid import WorldGrid

INF = float("inf")


def _axis_setup(origin: float, direction: float) -> Tuple[int, float, float]:
    """Return (step, t_delta, t_max) for one axis."""
    if direction > 0:
        step = 1
    elif direction < 0:
        step = -1
    else:
        # A zero component never crosses a boundary on this axis.
        return 0, INF, INF
    t_delta = abs(1.0 / direction)
    cell = math.floor(origin)
    if step > 0:
        t_max = (cell + 1.0 - origin) * t_delta
    else:
        t_max = (origin - cell) * t_delta
    return step, t_delta, t_max


def traverse(origin: Sequence[float], direction: Sequence[float], max_distance: float) -> Iterator[Tuple[Coord, float]]:
    """
    Yield ``(cell, distance)`` for every voxel the ray enters, in order,
    starting with the cell containing ``origin`` at distance 0.

    ``distance`` is in parametric units of ``direction`` (world units when it
    is normalized). Stops once the entry distance exceeds ``max_distance``.
    On an exact tMax tie the lowest axis (x, then y, then z) advances first.
    """
    ox, oy, oz = float(origin[0]), float(origin[1]), float(origin[2])
    dx, dy, dz = float(direction[0]), float(direction[1]), float(direction[2])

    cell = [math.floor(ox), math.floor(oy), math.floor(oz)]
    steps = [0, 0, 0]
    t_delta = [INF, INF, INF]
    t_max = [INF, INF, INF]
    for axis, (o, d) in enumerate(((ox, dx), (oy, dy), (oz, dz))):
        steps[axis], t_delta[axis], t_max[axis] = _axis_setup(o, d)

    dist = 0.0
    while dist <= max_distance:
        yield (cell[0], cell[1], cell[2]), dist

        tx, ty, tz = t_max
        if tx <= ty and tx <= tz:
            axis = 0
        elif ty <= tz:
            axis = 1
        else:
            axis = 2

        cell[axis] += steps[axis]
        dist = t_max[axis]
        t_max[axis] += t_delta[axis]


def cast(origin: Sequence[float], direction: Sequence[float], max_distance: float,
         world: WorldGrid) -> Optional[RaycastHit]:
    """First solid voxel along the ray within ``max_distance``, or None.

    ``direction`` must not be the zero vector.
    """
    previous: Optional[Coord] = None
    for cell, dist in traverse(origin, direction, max_distance):
        if world.is_solid(cell):
            return RaycastHit(coord=cell, previous=previous, distance=dist)
        previous = cell
    return None
