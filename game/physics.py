"""Per-tick player simulation: movement, gravity, jumping and block edits."""
from __future__ import annotations

import logging
import math
from typing import Dict, Optional, Set, Tuple

from panda3d.core import Vec3

from game import collision, raycast
from game.components import (
    ControlIntent,
    Coord,
    EditOp,
    PlayerState,
    RespawnSignal,
    StepResult,
    WorldEdit,
)
from game.transform import heading_of, look_vector, move_delta, turn_toward
from world.blocks import BlockType
from world.terrain import DEFAULT_SPAWN
from world.voxel_grid import WorldGrid

logger = logging.getLogger(__name__)

# Minimum squared displacement that counts as "moving" for the facing blend.
_TURN_THRESHOLD_SQ = 0.0001


class PhysicsStepper:
    """Advances one player through one frame against a WorldGrid.

    Tunables come from a plain ``gameplay_cfg`` dict (the ``physics`` config
    section); every key has an in-code default.
    """

    def __init__(self, gameplay_cfg: Optional[Dict[str, float]] = None,
                 spawn: Tuple[float, float, float] = DEFAULT_SPAWN) -> None:
        cfg = dict(gameplay_cfg or {})
        self.spawn = tuple(float(v) for v in spawn)
        self.gravity = float(cfg.get("gravity", 0.02))
        self.jump_force = float(cfg.get("jump_force", 0.4))
        self.speed = float(cfg.get("player_speed", 5.0))
        self.radius = float(cfg.get("player_radius", 0.3))
        self.height = float(cfg.get("player_height", 2.0))
        self.eye_height = float(cfg.get("eye_height", 1.9))
        self.reach = float(cfg.get("reach_distance", 5.0))
        self.death_altitude = float(cfg.get("death_altitude", -20.0))
        self.yaw_blend = float(cfg.get("yaw_blend", 0.2))

    # ------------------------------------------------------------------
    def step(self, world: WorldGrid, player: PlayerState, intent: ControlIntent, dt: float) -> StepResult:
        consumed: Set[str] = set()

        # 1. Gravity
        collision.apply_gravity(player, self.gravity)

        # 2. Desired horizontal displacement from held keys and the camera basis
        forward_in = float(intent.forward) - float(intent.backward)
        strafe_in = float(intent.right) - float(intent.left)
        move = move_delta(forward_in, strafe_in, intent.look_yaw, self.speed, dt)

        # 3. Axis-separated horizontal resolution
        collision.resolve_horizontal(world, player, move.x, move.z, self.radius, self.height)

        # 4. Vertical integration and ground clamp
        collision.integrate_vertical(world, player)

        # 5. Jump
        if intent.jump and collision.can_jump(world, player):
            player.velocity.y = self.jump_force
            consumed.add("jump")

        # 6. Kill plane
        if player.position.y < self.death_altitude:
            pos = player.position
            signal = RespawnSignal(position=(float(pos.x), float(pos.y), float(pos.z)), spawn=self.spawn)
            player.velocity = Vec3(0.0, 0.0, 0.0)
            logger.info("player fell below %.1f at (%.2f, %.2f, %.2f)", self.death_altitude, pos.x, pos.y, pos.z)
            return self._result(player, intent, consumed, respawn=signal)

        # 7. Facing follows movement along the shortest arc
        if move.lengthSquared() > _TURN_THRESHOLD_SQ:
            player.yaw = turn_toward(player.yaw, heading_of(move.x, move.z), self.yaw_blend)

        # 8. Block edits
        edit = None
        if intent.destroy or intent.place:
            edit = self._edit(world, player, intent)
            consumed.update(name for name in ("destroy", "place") if getattr(intent, name))

        return self._result(player, intent, consumed, edit=edit)

    # ------------------------------------------------------------------
    def eye_position(self, player: PlayerState) -> Vec3:
        pos = player.position
        return Vec3(pos.x, pos.y + self.eye_height, pos.z)

    def _edit(self, world: WorldGrid, player: PlayerState, intent: ControlIntent) -> Optional[WorldEdit]:
        hit = raycast.cast(
            self.eye_position(player),
            look_vector(intent.look_yaw, intent.look_pitch),
            self.reach,
            world,
        )
        if hit is None:
            return None

        if intent.destroy:
            # Destroy wins when both are requested; place is dropped this tick.
            removed = world.remove(hit.coord)
            logger.debug("destroyed %s at %s", removed.name, hit.coord)
            return WorldEdit(op=EditOp.DESTROY, coord=hit.coord, block=removed)

        anchor = hit.previous
        block = BlockType(intent.active_block)
        if anchor is None or block == BlockType.AIR or self._inside_player(player, anchor):
            return None
        world.set(anchor, block)
        logger.debug("placed %s at %s", block.name, anchor)
        return WorldEdit(op=EditOp.PLACE, coord=anchor, block=block)

    @staticmethod
    def _inside_player(player: PlayerState, coord: Coord) -> bool:
        pos = player.position
        px, py, pz = math.floor(pos.x), math.floor(pos.y), math.floor(pos.z)
        ax, ay, az = coord
        return ax == px and az == pz and (ay == py or ay == py + 1)

    @staticmethod
    def _result(player: PlayerState, intent: ControlIntent, consumed: Set[str], *,
                edit: Optional[WorldEdit] = None, respawn: Optional[RespawnSignal] = None) -> StepResult:
        return StepResult(
            player=player,
            intent=intent.cleared(*sorted(consumed)),
            edit=edit,
            respawn=respawn,
            consumed=frozenset(consumed),
        )
