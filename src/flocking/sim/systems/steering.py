from __future__ import annotations

from typing import TYPE_CHECKING

from pygame.math import Vector3

from ..utils.vectors import clamp_magnitude, safe_normalize

if TYPE_CHECKING:
    from ..core.boid import Boid
    from ..core.flock import Flock


def steer_towards(boid: Boid, direction: Vector3) -> Vector3:
    """Reynolds steering: desired velocity at full speed minus current velocity, capped at max_force."""
    desired = direction * boid.max_speed
    return clamp_magnitude(desired - boid.velocity_3d(), boid.max_force)


def separation(boid: Boid, flock: Flock) -> Vector3:
    position = boid.position_3d()
    steer = Vector3()
    count = 0

    for other in flock.boids:
        offset = position - boid.project(other.position_3d())
        distance = offset.length()
        # distance > 0 excludes the boid itself and boids stacked on top of it
        if 0.0 < distance < flock.goal_separation:
            steer += offset.normalize() / distance
            count += 1

    if count > 0:
        steer = steer / count

    if steer.length_squared() > 0.0:
        return steer_towards(boid, steer.normalize())
    return steer


def alignment(boid: Boid, flock: Flock) -> Vector3:
    position = boid.position_3d()
    heading = Vector3()
    count = 0

    for other in flock.boids:
        distance = position.distance_to(boid.project(other.position_3d()))
        if 0.0 < distance < flock.goal_alignment:
            heading += boid.project(other.velocity_3d())
            count += 1

    if count == 0:
        return Vector3()
    return steer_towards(boid, safe_normalize(heading / count))


def cohesion(boid: Boid, flock: Flock) -> Vector3:
    position = boid.position_3d()
    center = Vector3()
    count = 0

    for other in flock.boids:
        other_position = boid.project(other.position_3d())
        distance = position.distance_to(other_position)
        if 0.0 < distance < flock.goal_cohesion:
            center += other_position
            count += 1

    if count == 0:
        return Vector3()
    offset = center / count - position
    return steer_towards(boid, safe_normalize(offset))


def seek(boid: Boid, target: Vector3) -> Vector3:
    # Clamped to max_force like the three flocking behaviours
    offset = boid.project(target) - boid.position_3d()
    return steer_towards(boid, safe_normalize(offset))
