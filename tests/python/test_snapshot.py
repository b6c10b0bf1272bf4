from __future__ import annotations

import json

import pytest
from pygame.math import Vector2

from flocking.rng import DeterministicRng
from flocking.sim.core.boid import Boid2D, Boid3D, BoidWeights
from flocking.sim.core.flock import Flock
from flocking.sim.types.snapshot import boid_from_dict, boid_to_dict, flock_from_dict, flock_to_dict


def _mixed_flock() -> Flock:
    rng = DeterministicRng(17)
    weights = BoidWeights(alignment=0.7, cohesion=1.1, separation=2.3, targeting=0.01)
    boids = [
        Boid2D.with_random_heading(rng.next_point_2d(Vector2(10.0, 10.0), 5.0), rng, weights=weights),
        Boid3D.from_angle((1.0 / 3.0, 2.0 / 7.0, -0.1), 1.234, pitch=0.2, max_speed=3.5, max_force=0.07),
        Boid2D(position=(0.1, 0.2), velocity=(0.3, 0.4), acceleration=(0.5, 0.6), turn_radius=4.0),
    ]
    flock = Flock(boids=boids, goal_separation=12.5, goal_alignment=33.0, goal_cohesion=44.0, workers=2)
    flock.set_target((9.0, 8.0, 7.0))
    flock.update()
    return flock


def _fields(boid) -> tuple:
    return (
        type(boid),
        tuple(boid.position),
        tuple(boid.velocity),
        tuple(boid.acceleration),
        boid.max_speed,
        boid.max_force,
        boid.turn_radius,
        boid.weights,
    )


def test_flock_round_trips_through_json_exactly():
    flock = _mixed_flock()

    restored = flock_from_dict(json.loads(json.dumps(flock_to_dict(flock))))

    assert [_fields(boid) for boid in restored.boids] == [_fields(boid) for boid in flock.boids]
    assert restored.goal_separation == flock.goal_separation
    assert restored.goal_alignment == flock.goal_alignment
    assert restored.goal_cohesion == flock.goal_cohesion
    assert tuple(restored.target) == tuple(flock.target)
    assert restored.parallel == flock.parallel
    assert restored.workers == flock.workers


def test_flock_without_target_round_trips():
    flock = Flock(boids=[Boid2D()])
    payload = flock_to_dict(flock)

    assert payload["target"] is None
    assert flock_from_dict(payload).target is None


def test_boid_payload_uses_native_dimension():
    assert boid_to_dict(Boid2D())["position"] == [0.0, 0.0]
    assert boid_to_dict(Boid3D())["position"] == [0.0, 0.0, 0.0]
    assert boid_to_dict(Boid3D())["kind"] == "3d"


def test_unknown_boid_kind_is_rejected():
    payload = boid_to_dict(Boid2D())
    payload["kind"] = "4d"
    with pytest.raises(ValueError):
        boid_from_dict(payload)
