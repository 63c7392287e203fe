"""Block type registry shared by the world and gameplay layers."""
from __future__ import annotations

from enum import IntEnum
from typing import Tuple


class BlockType(IntEnum):
    AIR = 0
    GRASS = 1
    DIRT = 2
    STONE = 3
    LEAVES = 4
    WOOD = 5

    @property
    def solid(self) -> bool:
        return self is not BlockType.AIR


# Hotbar order; slot N selects HOTBAR[N - 1].
HOTBAR: Tuple[BlockType, ...] = (
    BlockType.GRASS,
    BlockType.DIRT,
    BlockType.STONE,
    BlockType.LEAVES,
    BlockType.WOOD,
)

DEFAULT_ACTIVE_BLOCK = BlockType.DIRT


def hotbar_block(slot: int) -> BlockType:
    """Return the block bound to a 1-based hotbar slot."""
    if not 1 <= int(slot) <= len(HOTBAR):
        raise ValueError(f"hotbar slot must be in 1..{len(HOTBAR)}, got {slot}")
    return HOTBAR[int(slot) - 1]
