import asyncio
import json

from flocking.app.server import FlockController
from flocking.config import BoidConfig, SimulationConfig


def _controller() -> FlockController:
    return FlockController(SimulationConfig(boids=BoidConfig(count=6)))


def test_snapshot_queue_ack_cleanup() -> None:
    controller = _controller()

    async def exercise() -> None:
        controller.tick = 1
        await controller._broadcast_snapshot()
        controller.tick = 2
        await controller._broadcast_snapshot()
        async with controller._queue_lock:
            queued_ticks = [item.tick for item in controller._snapshot_queue]
        assert queued_ticks == [1, 2]
        await controller.acknowledge(1)
        async with controller._queue_lock:
            remaining_ticks = [item.tick for item in controller._snapshot_queue]
        assert remaining_ticks == [2]

    asyncio.run(exercise())


def test_advance_steps_world_and_queues_snapshot() -> None:
    controller = _controller()

    async def exercise() -> None:
        await controller.set_target([50.0, 60.0])
        await controller.advance()
        await controller.advance()
        async with controller._queue_lock:
            items = list(controller._snapshot_queue)
        assert [item.tick for item in items] == [1, 2]
        payload = json.loads(items[-1].payload)
        assert payload["type"] == "snapshot"
        assert len(payload["payload"]["boids"]) == 6
        assert payload["payload"]["metadata"]["target"] == [50.0, 60.0, 0.0]
        assert payload["payload"]["metrics"]["tick"] == 1

    asyncio.run(exercise())
    assert controller.tick == 2


def test_reset_clears_queue_and_tick() -> None:
    controller = _controller()

    async def exercise() -> None:
        await controller.advance()
        await controller.reset()
        async with controller._queue_lock:
            ticks = [item.tick for item in controller._snapshot_queue]
        assert ticks == [0]

    asyncio.run(exercise())
    assert controller.tick == 0
