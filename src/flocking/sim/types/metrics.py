from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TickMetrics:
    tick: int
    population: int
    average_speed: float
    max_speed: float
    polarization: float
    centroid_x: float
    centroid_y: float
    centroid_z: float
    tick_duration_ms: float = 0.0
