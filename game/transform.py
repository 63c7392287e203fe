# game/transform.py
import math

from panda3d.core import Vec3

# ---- Angles ---------------------------------------------------------------

def wrap_pi(a: float) -> float:
    """Wrap radians into (-pi, pi]."""
    r = ((a + math.pi) % (2 * math.pi)) - math.pi
    return math.pi if r <= -math.pi else r

def turn_toward(current: float, target: float, blend: float) -> float:
    """Move ``current`` a ``blend`` fraction of the shortest arc to ``target``."""
    return wrap_pi(current + wrap_pi(target - current) * blend)

def heading_of(dx: float, dz: float) -> float:
    """Yaw of a horizontal direction; 0 faces +Z."""
    return math.atan2(dx, dz)

# ---- Y-up world, camera looks down -Z at yaw 0 ---------------------------
# Yaw rotates around +Y (positive turns left), pitch around the camera X axis
# (positive looks up).

WORLD_UP = Vec3(0.0, 1.0, 0.0)

def look_vector(yaw_rad: float, pitch_rad: float) -> Vec3:
    """Unit camera look direction:
      X = -sin(yaw) * cos(pitch)
      Y =  sin(pitch)
      Z = -cos(yaw) * cos(pitch)
    """
    sy, cy = math.sin(yaw_rad), math.cos(yaw_rad)
    sp, cp = math.sin(pitch_rad), math.cos(pitch_rad)
    return Vec3(-sy * cp, sp, -cy * cp)

def horizontal_basis(yaw_rad: float) -> tuple:
    """(forward, right) unit vectors in the XZ plane.

    Forward is the look direction with its vertical part dropped; right is
    forward x up. Derived from yaw so a camera looking straight up or down
    still has a usable basis.
    """
    forward = Vec3(-math.sin(yaw_rad), 0.0, -math.cos(yaw_rad))
    right = forward.cross(WORLD_UP)
    right.normalize()
    return forward, right

def move_delta(forward_in: float, strafe_in: float, yaw_rad: float, speed: float, dt: float) -> Vec3:
    """
    World-space horizontal displacement for one tick.
    - forward_in: +1 forward, -1 backward
    - strafe_in: +1 right, -1 left
    Diagonals are normalized so they do not exceed ``speed``.
    """
    forward, right = horizontal_basis(yaw_rad)
    move = forward * forward_in + right * strafe_in
    if move.lengthSquared() > 0.0:
        move.normalize()
        move *= speed * dt
    return move
