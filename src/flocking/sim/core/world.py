from __future__ import annotations

import logging
from dataclasses import replace
from time import perf_counter
from typing import List, Sequence

from pygame.math import Vector2, Vector3

from ...config import SimulationConfig
from ...rng import DeterministicRng
from ..systems import metrics as metrics_system
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotMetadata, boid_to_dict
from .boid import Boid, boid_class_for, boid_params
from .flock import Flock

logger = logging.getLogger(__name__)


def wrap_boid(boid: Boid, world_size: float) -> Boid:
    """Teleport a boid that left the [0, world_size) box to the opposite side."""
    position = boid.position
    wrapped = position.copy()
    for axis in range(len(position)):
        wrapped[axis] = position[axis] % world_size
    if wrapped == position:
        return boid
    return replace(boid, position=wrapped)


class World:
    def __init__(self, config: SimulationConfig):
        self._config = config
        self._rng = DeterministicRng(config.seed)
        self._flock = Flock.from_config(config.flock)
        self._metrics: TickMetrics | None = None
        self._bootstrap_population()

    @property
    def flock(self) -> Flock:
        return self._flock

    @property
    def boids(self) -> List[Boid]:
        return self._flock.boids

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    def reset(self) -> None:
        target = self._flock.target
        self._rng.reset()
        self._flock = Flock.from_config(self._config.flock)
        self._flock.target = target
        self._metrics = None
        self._bootstrap_population()
        logger.debug("World reset with seed %s", self._config.seed)

    def step(self, tick: int) -> TickMetrics:
        start = perf_counter()
        self._flock.update()
        if self._config.wrap and self._config.world_size > 0.0:
            size = self._config.world_size
            self._flock.boids = [wrap_boid(boid, size) for boid in self._flock.boids]
        duration_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.create_metrics(tick, self._flock, duration_ms)
        logger.debug("tick=%d population=%d took %.3fms", tick, self._metrics.population, duration_ms)
        return self._metrics

    def set_target(self, point: Sequence[float]) -> None:
        self._flock.set_target(point)

    def clear_target(self) -> None:
        self._flock.clear_target()

    def snapshot(self, tick: int) -> Snapshot:
        metrics = self._metrics
        if metrics is None:
            metrics = metrics_system.create_metrics(tick, self._flock, 0.0)
        target = self._flock.target
        metadata = SnapshotMetadata(
            world_size=self._config.world_size,
            dimensions=self._config.boids.dimensions,
            seed=self._config.seed,
            config_version=self._config.config_version,
            target=None if target is None else [target.x, target.y, target.z],
        )
        return Snapshot(
            tick=tick,
            metrics=metrics,
            boids=[boid_to_dict(boid) for boid in self._flock.boids],
            metadata=metadata,
        )

    def _bootstrap_population(self) -> None:
        boids_config = self._config.boids
        boid_cls = boid_class_for(boids_config.dimensions)
        params = boid_params(boids_config)
        half = self._config.world_size * 0.5
        spread = boids_config.spawn_spread
        for _ in range(boids_config.count):
            if boids_config.dimensions == 2:
                position = self._rng.next_point_2d(Vector2(half, half), spread)
            else:
                position = self._rng.next_point_3d(Vector3(half, half, half), spread)
            self._flock.boids.append(boid_cls.with_random_heading(position, self._rng, **params))
