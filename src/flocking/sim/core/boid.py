from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, ClassVar, Dict, Optional, Type

from pygame.math import Vector2, Vector3

from ...config import BoidConfig, WeightsConfig
from ...rng import DeterministicRng
from ..systems import steering
from ..utils.vectors import clamp_magnitude, to_2d, to_3d

if TYPE_CHECKING:
    from .flock import Flock


@dataclass(frozen=True, slots=True)
class BoidWeights:
    alignment: float = 1.5
    cohesion: float = 1.0
    separation: float = 1.0
    targeting: float = 0.0003

    def __post_init__(self) -> None:
        for name in ("alignment", "cohesion", "separation", "targeting"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"Boid weight {name} must be non-negative")

    @classmethod
    def from_config(cls, config: WeightsConfig) -> "BoidWeights":
        return cls(
            alignment=config.alignment,
            cohesion=config.cohesion,
            separation=config.separation,
            targeting=config.targeting,
        )


class Boid(ABC):
    """Capabilities shared by every boid kind.

    Steering is computed against a canonical 3D view of the flock; each kind
    decides how that view maps onto its own state. Boids are values: ``update``
    and ``with_force`` return a new boid and leave the receiver untouched, so
    a whole flock can be advanced from one read-only snapshot.
    """

    __slots__ = ()

    kind: ClassVar[str]
    max_speed: float
    max_force: float
    turn_radius: float
    weights: BoidWeights

    @abstractmethod
    def position_3d(self) -> Vector3: ...

    @abstractmethod
    def velocity_3d(self) -> Vector3: ...

    @abstractmethod
    def acceleration_3d(self) -> Vector3: ...

    @abstractmethod
    def project(self, vector: Vector3) -> Vector3:
        """Restrict a canonical vector to the space this boid lives in."""

    @abstractmethod
    def with_force(self, force: Vector3) -> "Boid": ...

    @classmethod
    @abstractmethod
    def from_angle(cls, position, angle: float, **params) -> "Boid": ...

    @classmethod
    def with_random_heading(cls, position, rng: Optional[DeterministicRng] = None, **params) -> "Boid":
        angle = rng.next_heading() if rng is not None else random.random() * 2.0 * math.pi
        return cls.from_angle(position, angle, **params)

    def separate(self, flock: Flock) -> Vector3:
        return steering.separation(self, flock)

    def align(self, flock: Flock) -> Vector3:
        return steering.alignment(self, flock)

    def cohesion(self, flock: Flock) -> Vector3:
        return steering.cohesion(self, flock)

    def seek(self, target: Vector3) -> Vector3:
        return steering.seek(self, target)

    def get_weights(self) -> BoidWeights:
        return self.weights

    def set_weights(self, weights: BoidWeights) -> None:
        self.weights = replace(weights)

    def update(self, flock: Flock) -> "Boid":
        weights = self.weights
        force = (
            self.separate(flock) * weights.separation
            + self.align(flock) * weights.alignment
            + self.cohesion(flock) * weights.cohesion
        )
        if flock.target is not None:
            force += self.seek(flock.target) * weights.targeting
        return self.with_force(force)


@dataclass(slots=True)
class Boid2D(Boid):
    kind: ClassVar[str] = "2d"

    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    acceleration: Vector2 = field(default_factory=Vector2)
    max_speed: float = 2.0
    max_force: float = 0.03
    turn_radius: float = 2.0
    weights: BoidWeights = field(default_factory=BoidWeights)

    def __post_init__(self) -> None:
        self.position = Vector2(self.position)
        self.velocity = Vector2(self.velocity)
        self.acceleration = Vector2(self.acceleration)

    @classmethod
    def from_angle(cls, position, angle: float, **params) -> "Boid2D":
        return cls(position=Vector2(position), velocity=Vector2(math.cos(angle), math.sin(angle)), **params)

    def position_3d(self) -> Vector3:
        return to_3d(self.position)

    def velocity_3d(self) -> Vector3:
        return to_3d(self.velocity)

    def acceleration_3d(self) -> Vector3:
        return to_3d(self.acceleration)

    def project(self, vector: Vector3) -> Vector3:
        return to_3d(to_2d(vector))

    def with_force(self, force: Vector3) -> "Boid2D":
        velocity = clamp_magnitude(self.velocity + to_2d(force), self.max_speed)
        return replace(self, position=self.position + velocity, velocity=velocity, acceleration=Vector2())


@dataclass(slots=True)
class Boid3D(Boid):
    kind: ClassVar[str] = "3d"

    position: Vector3 = field(default_factory=Vector3)
    velocity: Vector3 = field(default_factory=Vector3)
    acceleration: Vector3 = field(default_factory=Vector3)
    max_speed: float = 2.0
    max_force: float = 0.03
    turn_radius: float = 2.0
    weights: BoidWeights = field(default_factory=BoidWeights)

    def __post_init__(self) -> None:
        self.position = Vector3(self.position)
        self.velocity = Vector3(self.velocity)
        self.acceleration = Vector3(self.acceleration)

    @classmethod
    def from_angle(cls, position, angle: float, pitch: float = 0.0, **params) -> "Boid3D":
        """Heading ``angle`` in the xy plane, tilted towards +z by ``pitch``."""
        velocity = Vector3(
            math.cos(angle) * math.cos(pitch),
            math.sin(angle) * math.cos(pitch),
            math.sin(pitch),
        )
        return cls(position=Vector3(position), velocity=velocity, **params)

    def position_3d(self) -> Vector3:
        return Vector3(self.position)

    def velocity_3d(self) -> Vector3:
        return Vector3(self.velocity)

    def acceleration_3d(self) -> Vector3:
        return Vector3(self.acceleration)

    def project(self, vector: Vector3) -> Vector3:
        return Vector3(vector)

    def with_force(self, force: Vector3) -> "Boid3D":
        velocity = clamp_magnitude(self.velocity + force, self.max_speed)
        return replace(self, position=self.position + velocity, velocity=velocity, acceleration=Vector3())


BOID_KINDS: Dict[str, Type[Boid]] = {Boid2D.kind: Boid2D, Boid3D.kind: Boid3D}


def boid_class_for(dimensions: int) -> Type[Boid]:
    try:
        return BOID_KINDS[f"{dimensions}d"]
    except KeyError:
        raise ValueError(f"Unsupported boid dimensions: {dimensions}") from None


def boid_params(config: BoidConfig) -> dict:
    return {
        "max_speed": config.max_speed,
        "max_force": config.max_force,
        "turn_radius": config.turn_radius,
        "weights": BoidWeights.from_config(config.weights),
    }
