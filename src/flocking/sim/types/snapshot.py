from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from pygame.math import Vector2, Vector3

from ..core.boid import BOID_KINDS, Boid, BoidWeights
from ..core.flock import Flock
from .metrics import TickMetrics


@dataclass(slots=True)
class Snapshot:
    tick: int
    metrics: TickMetrics
    boids: List[Dict[str, Any]]
    metadata: "SnapshotMetadata"


@dataclass(slots=True)
class SnapshotMetadata:
    world_size: float
    dimensions: int
    seed: int
    config_version: str
    target: Optional[List[float]]


def _components(vector: Vector2 | Vector3) -> List[float]:
    return [float(component) for component in vector]


def boid_to_dict(boid: Boid) -> Dict[str, Any]:
    return {
        "kind": boid.kind,
        "position": _components(boid.position),
        "velocity": _components(boid.velocity),
        "acceleration": _components(boid.acceleration),
        "max_speed": boid.max_speed,
        "max_force": boid.max_force,
        "turn_radius": boid.turn_radius,
        "weights": asdict(boid.weights),
    }


def boid_from_dict(data: Dict[str, Any]) -> Boid:
    kind = data.get("kind")
    boid_cls = BOID_KINDS.get(kind)
    if boid_cls is None:
        raise ValueError(f"Unknown boid kind: {kind!r}")
    return boid_cls(
        position=data["position"],
        velocity=data["velocity"],
        acceleration=data["acceleration"],
        max_speed=float(data["max_speed"]),
        max_force=float(data["max_force"]),
        turn_radius=float(data["turn_radius"]),
        weights=BoidWeights(**data["weights"]),
    )


def flock_to_dict(flock: Flock) -> Dict[str, Any]:
    return {
        "boids": [boid_to_dict(boid) for boid in flock.boids],
        "goal_separation": flock.goal_separation,
        "goal_alignment": flock.goal_alignment,
        "goal_cohesion": flock.goal_cohesion,
        "target": None if flock.target is None else _components(flock.target),
        "parallel": flock.parallel,
        "workers": flock.workers,
    }


def flock_from_dict(data: Dict[str, Any]) -> Flock:
    return Flock(
        boids=[boid_from_dict(item) for item in data.get("boids", [])],
        goal_separation=float(data["goal_separation"]),
        goal_alignment=float(data["goal_alignment"]),
        goal_cohesion=float(data["goal_cohesion"]),
        target=data.get("target"),
        parallel=bool(data.get("parallel", False)),
        workers=data.get("workers"),
    )
