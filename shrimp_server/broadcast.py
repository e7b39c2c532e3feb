"""Snapshot fan-out decoupled from the simulation rate."""

from __future__ import annotations

from typing import Optional

from . import protocol
from .clock import FixedRateTimer
from .sessions import SessionRegistry
from .snapshot import WorldSnapshot
from .transport import Transport
from .world import World


class BroadcastGate:
    """Send the latest world snapshot to every session at ``broadcast_rate``.

    Every session receives the same payload; clients find themselves by
    matching their session id against the player list.
    """

    def __init__(self, world: World, registry: SessionRegistry, transport: Transport) -> None:
        self.world = world
        self.registry = registry
        self.transport = transport
        self.timer = FixedRateTimer(world.config.broadcast_interval, self.fire, name="broadcast")
        self.sent: int = 0

    async def fire(self) -> Optional[WorldSnapshot]:
        if self.registry.count == 0:
            return None
        snapshot = self.world.snapshot()
        await self.transport.broadcast(protocol.encode_snapshot(snapshot))
        self.sent += 1
        return snapshot

    async def run(self) -> None:
        await self.timer.run()

    def stop(self) -> None:
        self.timer.stop()
