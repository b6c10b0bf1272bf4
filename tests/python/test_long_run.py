import pytest

from flocking.config import BoidConfig, SimulationConfig
from flocking.sim.core.world import World
from flocking.sim.utils.vectors import is_finite


@pytest.mark.config_change
def test_long_run_stays_finite_and_bounded():
    config = SimulationConfig(boids=BoidConfig(count=80, spawn_spread=80.0))
    world = World(config)

    polarization = []
    tick_ms = []
    for tick in range(300):
        metrics = world.step(tick)
        polarization.append(metrics.polarization)
        tick_ms.append(metrics.tick_duration_ms)
        for boid in world.boids:
            assert is_finite(boid.position)
            assert boid.velocity.length() <= boid.max_speed * (1.0 + 1e-12)

    summary = (
        f"first_polarization={polarization[0]:.3f}, "
        f"final_polarization={polarization[-1]:.3f}, "
        f"avg_tick_ms={sum(tick_ms) / len(tick_ms):.2f}"
    )
    assert world.metrics.population == 80, summary
    assert polarization[-1] >= polarization[0], summary
