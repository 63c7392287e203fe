"""Sparse voxel storage keyed by integer coordinates."""
from __future__ import annotations

from typing import Dict, ItemsView, Iterator, Sequence, Tuple

from world.blocks import BlockType

Coord = Tuple[int, int, int]


def _key(coord: Sequence[int]) -> Coord:
    if len(coord) != 3:
        raise ValueError("voxel coordinates must contain three integers")
    x, y, z = coord
    return int(x), int(y), int(z)


class WorldGrid:
    """Unbounded sparse block map. Absent keys read back as air."""

    __slots__ = ("_blocks",)

    def __init__(self) -> None:
        self._blocks: Dict[Coord, BlockType] = {}

    # API ----------------------------------------------------------------
    def get(self, coord: Sequence[int]) -> BlockType:
        return self._blocks.get(_key(coord), BlockType.AIR)

    def set(self, coord: Sequence[int], block: BlockType) -> None:
        block = BlockType(block)
        if block == BlockType.AIR:
            raise ValueError("air is never stored; use remove() instead")
        self._blocks[_key(coord)] = block

    def remove(self, coord: Sequence[int]) -> BlockType:
        """Delete ``coord`` and return what was there (air if nothing)."""
        return self._blocks.pop(_key(coord), BlockType.AIR)

    def is_solid(self, coord: Sequence[int]) -> bool:
        return _key(coord) in self._blocks

    def bounds(self) -> Tuple[Coord, Coord]:
        if not self._blocks:
            raise ValueError("grid contains no solid blocks")
        xs, ys, zs = zip(*self._blocks)
        return (min(xs), min(ys), min(zs)), (max(xs), max(ys), max(zs))

    def items(self) -> ItemsView[Coord, BlockType]:
        return self._blocks.items()

    def copy(self) -> "WorldGrid":
        clone = WorldGrid()
        clone._blocks = dict(self._blocks)
        return clone

    # Container protocol -------------------------------------------------
    def __len__(self) -> int:
        return len(self._blocks)

    def __contains__(self, coord: object) -> bool:
        try:
            return _key(coord) in self._blocks  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._blocks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WorldGrid):
            return NotImplemented
        return self._blocks == other._blocks

    def __repr__(self) -> str:
        return f"WorldGrid(blocks={len(self._blocks)})"
