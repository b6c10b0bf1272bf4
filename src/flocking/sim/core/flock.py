from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, List, Optional, Sequence

from pygame.math import Vector3

from ...config import FlockConfig
from .boid import Boid
from .scope import Scope, maybe_scope


def _as_target(point: Optional[Sequence[float]]) -> Optional[Vector3]:
    if point is None:
        return None
    if len(point) == 2:
        return Vector3(point[0], point[1], 0.0)
    return Vector3(point)


@dataclass
class Flock:
    """The owning collection of boids plus the interaction radii they share.

    ``update`` advances every boid from one frozen snapshot of the flock taken
    before the step, either sequentially or across a thread pool. Both paths
    produce identical results because no boid reads another boid's new state.
    """

    boids: List[Boid] = field(default_factory=list)
    goal_separation: float = 25.0
    goal_alignment: float = 50.0
    goal_cohesion: float = 50.0
    target: Optional[Vector3] = None
    parallel: bool = False
    workers: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("goal_separation", "goal_alignment", "goal_cohesion"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"{name} must be non-negative")
        self.target = _as_target(self.target)

    @classmethod
    def from_config(cls, config: FlockConfig, boids: Iterable[Boid] = ()) -> "Flock":
        return cls(
            boids=list(boids),
            goal_separation=config.goal_separation,
            goal_alignment=config.goal_alignment,
            goal_cohesion=config.goal_cohesion,
            target=config.target,
            parallel=config.parallel,
            workers=config.workers,
        )

    def __len__(self) -> int:
        return len(self.boids)

    def __iter__(self) -> Iterator[Boid]:
        return iter(self.boids)

    def frozen(self) -> "Flock":
        # Boids are not mutated during a step; only the membership is frozen.
        return replace(self, boids=tuple(self.boids))

    def update(self) -> None:
        snapshot = self.frozen()

        def step(scope: Scope) -> List[Boid]:
            return scope.map(lambda boid: boid.update(snapshot), snapshot.boids)

        self.boids = maybe_scope(step, parallel=self.parallel, workers=self.workers)

    def set_target(self, point: Sequence[float]) -> None:
        self.target = _as_target(point)

    def clear_target(self) -> None:
        self.target = None

    def positions(self) -> List[Vector3]:
        return [boid.position_3d() for boid in self.boids]

    def velocities(self) -> List[Vector3]:
        return [boid.velocity_3d() for boid in self.boids]
