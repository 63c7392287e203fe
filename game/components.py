"""Data types exchanged between the simulation core and its collaborators."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from panda3d.core import LPoint3, Vec3

from world.blocks import DEFAULT_ACTIVE_BLOCK, BlockType
from world.terrain import DEFAULT_SPAWN

Coord = Tuple[int, int, int]

# Flags the stepper consumes; directional flags belong to the input side.
EDGE_FLAGS: Tuple[str, ...] = ("jump", "place", "destroy")


class CameraMode(Enum):
    FIRST_PERSON = "first_person"
    THIRD_PERSON = "third_person"


class EditOp(Enum):
    PLACE = "place"
    DESTROY = "destroy"


@dataclass
class PlayerState:
    """Avatar kinematics. Position is the centre of the feet."""
    position: LPoint3 = field(default_factory=lambda: LPoint3(*DEFAULT_SPAWN))
    velocity: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    camera_mode: CameraMode = CameraMode.FIRST_PERSON
    yaw: float = 0.0  # radians, facing of the visual avatar

    @classmethod
    def spawn_at(cls, spawn: Tuple[float, float, float], camera_mode: CameraMode = CameraMode.FIRST_PERSON) -> "PlayerState":
        x, y, z = (float(v) for v in spawn)
        return cls(position=LPoint3(x, y, z), camera_mode=camera_mode)


@dataclass(frozen=True)
class ControlIntent:
    """Input snapshot for one tick.

    Directional flags are held (level-triggered). ``jump``, ``place`` and
    ``destroy`` are requests that the stepper clears once acted upon.
    """
    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    jump: bool = False
    place: bool = False
    destroy: bool = False
    look_yaw: float = 0.0  # radians, 0 looks down -Z
    look_pitch: float = 0.0  # radians, positive looks up
    active_block: BlockType = DEFAULT_ACTIVE_BLOCK

    def cleared(self, *flags: str) -> "ControlIntent":
        unknown = set(flags) - set(EDGE_FLAGS)
        if unknown:
            raise ValueError(f"not edge-triggered flags: {sorted(unknown)}")
        return replace(self, **{name: False for name in flags})

    def pending(self) -> FrozenSet[str]:
        return frozenset(name for name in EDGE_FLAGS if getattr(self, name))


@dataclass(frozen=True)
class RaycastHit:
    coord: Coord
    previous: Optional[Coord]  # last air cell before the hit; None if the ray started inside
    distance: float = 0.0


@dataclass(frozen=True)
class WorldEdit:
    op: EditOp
    coord: Coord
    block: BlockType  # placed type, or the type that was removed


@dataclass(frozen=True)
class RespawnSignal:
    position: Tuple[float, float, float]
    spawn: Tuple[float, float, float]


@dataclass
class StepResult:
    player: PlayerState
    intent: ControlIntent
    edit: Optional[WorldEdit] = None
    respawn: Optional[RespawnSignal] = None
    consumed: FrozenSet[str] = frozenset()
