"""Game-loop state around the simulation core: world lifetime, respawn, pause."""
from __future__ import annotations

import logging
import random
from typing import Any, Dict, Optional, Tuple

from engine import config as engine_config
from game import event_bus
from game.components import CameraMode, ControlIntent, PlayerState, RespawnSignal, StepResult
from game.event_bus import EventBus
from game.physics import PhysicsStepper
from world.blocks import BlockType, hotbar_block
from world.terrain import DEFAULT_SPAWN, generate
from world.voxel_grid import WorldGrid

logger = logging.getLogger(__name__)


class GameSession:
    """Owns the current world, the player and the stepper.

    The grid is only ever replaced by rebinding ``self.world``; a reader holding
    the old reference keeps a complete (if stale) grid.
    """

    def __init__(
        self,
        cfg: Optional[Dict[str, Any]] = None,
        *,
        seed: Optional[float] = None,
        rng: Optional[random.Random] = None,
        bus: Optional[EventBus] = None,
    ) -> None:
        if cfg is None:
            cfg = {"world": engine_config.section("world"), "physics": engine_config.section("physics")}
        world_cfg = dict(cfg.get("world", {}))

        self.radius = int(world_cfg.get("radius", 30))
        self.spawn: Tuple[float, float, float] = tuple(float(v) for v in world_cfg.get("spawn", DEFAULT_SPAWN))
        self.seed_scale = float(world_cfg.get("new_location_seed_scale", 10000.0))
        self.rng = rng or random.Random()
        self.bus = bus or EventBus()
        self.stepper = PhysicsStepper(cfg.get("physics", {}), spawn=self.spawn)

        self.seed = float(seed if seed is not None else world_cfg.get("seed", 1))
        self.world: WorldGrid = generate(self.seed, self.radius)
        self.player = PlayerState.spawn_at(self.spawn)
        self.paused = False
        self.pending_respawn: Optional[RespawnSignal] = None

    # ------------------------------------------------------------------
    def tick(self, intent: ControlIntent, dt: float) -> Optional[StepResult]:
        """Advance one frame; returns None while paused."""
        if self.paused:
            return None
        result = self.stepper.step(self.world, self.player, intent, dt)
        if result.edit is not None:
            self.bus.emit(event_bus.WORLD_EDIT, result.edit)
        if result.respawn is not None:
            # Simulation stays halted until the player picks restart or a new location.
            self.paused = True
            self.pending_respawn = result.respawn
            logger.info("respawn requested; session paused")
            self.bus.emit(event_bus.RESPAWN, result.respawn)
        return result

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        """Unpause; a player still waiting on a respawn is relocated first."""
        if self.pending_respawn is not None:
            self.respawn()
            return
        self.paused = False

    def respawn(self) -> None:
        """Put the player back at the spawn point in the current world."""
        spawn = self.pending_respawn.spawn if self.pending_respawn is not None else self.spawn
        self.player = PlayerState.spawn_at(spawn, camera_mode=self.player.camera_mode)
        self.pending_respawn = None
        self.paused = False
        logger.info("player respawned at %s", spawn)

    # ------------------------------------------------------------------
    def restart(self) -> None:
        """Rebuild the current seed's world, discarding every edit."""
        self._replace_world(self.seed)

    def new_location(self) -> float:
        """Pick a fresh seed and rebuild; returns the new seed."""
        seed = self.rng.random() * self.seed_scale
        self._replace_world(seed)
        return seed

    def _replace_world(self, seed: float) -> None:
        self.seed = float(seed)
        self.world = generate(self.seed, self.radius)
        self.player = PlayerState.spawn_at(self.spawn, camera_mode=self.player.camera_mode)
        self.pending_respawn = None
        self.paused = False
        logger.info("world replaced seed=%s blocks=%d", self.seed, len(self.world))
        self.bus.emit(event_bus.WORLD_REPLACED, self.world, self.seed)

    # ------------------------------------------------------------------
    def toggle_camera(self) -> CameraMode:
        if self.player.camera_mode is CameraMode.FIRST_PERSON:
            self.player.camera_mode = CameraMode.THIRD_PERSON
        else:
            self.player.camera_mode = CameraMode.FIRST_PERSON
        return self.player.camera_mode

    @staticmethod
    def select_block(slot: int) -> BlockType:
        return hotbar_block(slot)
