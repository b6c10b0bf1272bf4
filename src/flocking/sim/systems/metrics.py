from __future__ import annotations

from pygame.math import Vector3

from ..core.flock import Flock
from ..types.metrics import TickMetrics


def create_metrics(tick: int, flock: Flock, duration_ms: float) -> TickMetrics:
    population = len(flock)
    if population == 0:
        return TickMetrics(
            tick=tick,
            population=0,
            average_speed=0.0,
            max_speed=0.0,
            polarization=0.0,
            centroid_x=0.0,
            centroid_y=0.0,
            centroid_z=0.0,
            tick_duration_ms=duration_ms,
        )

    speed_sum = 0.0
    max_speed = 0.0
    heading_sum = Vector3()
    centroid = Vector3()
    for boid in flock.boids:
        velocity = boid.velocity_3d()
        speed = velocity.length()
        speed_sum += speed
        if speed > max_speed:
            max_speed = speed
        if speed > 0.0:
            heading_sum += velocity / speed
        centroid += boid.position_3d()
    centroid = centroid / population

    return TickMetrics(
        tick=tick,
        population=population,
        average_speed=speed_sum / population,
        max_speed=max_speed,
        polarization=(heading_sum / population).length(),
        centroid_x=centroid.x,
        centroid_y=centroid.y,
        centroid_z=centroid.z,
        tick_duration_ms=duration_ms,
    )
