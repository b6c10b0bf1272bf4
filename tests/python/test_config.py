from __future__ import annotations

from pathlib import Path

import pytest

from flocking.config import SimulationConfig, load_config


def test_defaults_match_reference_constants():
    config = SimulationConfig()

    assert config.flock.goal_separation == 25.0
    assert config.flock.goal_alignment == 50.0
    assert config.flock.goal_cohesion == 50.0
    assert config.boids.weights.alignment == 1.5
    assert config.boids.weights.targeting == 0.0003
    assert config.boids.max_speed == 2.0
    assert config.boids.max_force == 0.03


def test_from_yaml_reads_nested_sections(tmp_path):
    path = tmp_path / "flock.yaml"
    path.write_text(
        """
seed: 7
world_size: 300.0
boids:
  dimensions: 3
  count: 12
  weights:
    separation: 2.0
flock:
  goal_separation: 10.0
  target: [1, 2, 3]
  parallel: true
  workers: 2
"""
    )

    config = SimulationConfig.from_yaml(path)

    assert config.seed == 7
    assert config.world_size == 300.0
    assert config.boids.dimensions == 3
    assert config.boids.count == 12
    assert config.boids.weights.separation == 2.0
    assert config.boids.weights.alignment == 1.5
    assert config.flock.goal_separation == 10.0
    assert config.flock.goal_alignment == 50.0
    assert config.flock.target == (1.0, 2.0, 3.0)
    assert config.flock.parallel is True
    assert config.flock.workers == 2


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert SimulationConfig.from_yaml(path) == SimulationConfig()


def test_invalid_dimensions_and_target_are_rejected():
    with pytest.raises(ValueError):
        load_config({"boids": {"dimensions": 4}})
    with pytest.raises(ValueError):
        load_config({"flock": {"target": [1.0]}})


def test_shipped_default_yaml_matches_dataclass_defaults():
    path = Path(__file__).resolve().parents[2] / "configs" / "default.yaml"
    assert SimulationConfig.from_yaml(path) == SimulationConfig()
