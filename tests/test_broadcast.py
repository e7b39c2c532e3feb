import asyncio
import json

from shrimp_server.broadcast import BroadcastGate
from shrimp_server.clock import SimulationClock
from shrimp_server.config import GameConfig
from shrimp_server.sessions import SessionRegistry
from shrimp_server.world import World


def test_gate_is_silent_without_sessions(world, transport):
    gate = BroadcastGate(world, SessionRegistry(world, transport), transport)

    assert asyncio.run(gate.fire()) is None
    assert transport.broadcasts == []


def test_gate_sends_identical_world_to_everyone(world, transport):
    registry = SessionRegistry(world, transport)
    gate = BroadcastGate(world, registry, transport)

    async def exercise():
        await registry.on_join("a")
        await registry.on_join("b")
        transport.broadcasts.clear()
        return await gate.fire()

    snapshot = asyncio.run(exercise())

    assert len(transport.broadcasts) == 1
    payload = json.loads(transport.broadcasts[0])
    assert payload["type"] == "world-snapshot"
    assert {p["id"] for p in payload["players"]} == {"a", "b"}
    assert len(payload["foods"]) == world.food_count
    assert payload["players"] == [state.to_dict() for state in snapshot.players]
    assert gate.sent == 1


def test_gate_runs_slower_than_simulation(transport):
    world = World(GameConfig(tick_rate=200, broadcast_rate=50, food_floor=3, seed=12))
    registry = SessionRegistry(world, transport)
    clock = SimulationClock(world)
    gate = BroadcastGate(world, registry, transport)

    async def exercise():
        await registry.on_join("a")
        transport.broadcasts.clear()
        tasks = [asyncio.create_task(clock.run()), asyncio.create_task(gate.run())]
        await asyncio.sleep(0.2)
        clock.stop()
        gate.stop()
        await asyncio.gather(*tasks)

    asyncio.run(exercise())

    assert gate.sent > 0
    assert clock.timer.fired > gate.sent
    assert gate.sent == len(transport.broadcasts)
