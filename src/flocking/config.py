from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

import yaml


@dataclass
class WeightsConfig:
    alignment: float = 1.5
    cohesion: float = 1.0
    separation: float = 1.0
    targeting: float = 0.0003


@dataclass
class BoidConfig:
    dimensions: int = 2
    count: int = 200
    max_speed: float = 2.0
    max_force: float = 0.03
    turn_radius: float = 2.0
    # Boids spawn uniformly inside +/- spawn_spread of the world centre
    spawn_spread: float = 100.0
    weights: WeightsConfig = field(default_factory=WeightsConfig)


@dataclass
class FlockConfig:
    goal_separation: float = 25.0
    goal_alignment: float = 50.0
    goal_cohesion: float = 50.0
    target: Optional[Tuple[float, ...]] = None
    parallel: bool = False
    workers: Optional[int] = None


@dataclass
class SimulationConfig:
    seed: int = 42
    world_size: float = 800.0
    wrap: bool = True
    config_version: str = "v1"
    boids: BoidConfig = field(default_factory=BoidConfig)
    flock: FlockConfig = field(default_factory=FlockConfig)

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


def _target(value: object) -> Optional[Tuple[float, ...]]:
    if value is None:
        return None
    if isinstance(value, (tuple, list)) and len(value) in (2, 3):
        return tuple(float(component) for component in value)
    raise ValueError(f"Flock target must be a 2 or 3 element sequence, got {value!r}")


def load_config(raw: dict) -> SimulationConfig:
    boids_raw = dict(raw.get("boids", {}))
    weights = WeightsConfig(**boids_raw.pop("weights", {}))
    boids = BoidConfig(weights=weights, **boids_raw)
    if boids.dimensions not in (2, 3):
        raise ValueError(f"Unsupported boid dimensions: {boids.dimensions}")

    flock_raw = dict(raw.get("flock", {}))
    target = _target(flock_raw.pop("target", None))
    flock = FlockConfig(target=target, **flock_raw)

    sim_values = {k: v for k, v in raw.items() if k not in {"boids", "flock"}}
    return SimulationConfig(boids=boids, flock=flock, **sim_values)
