"""Fixed-rate scheduling for the simulation and the broadcast loop."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from .collision import CollisionResolver, TickReport
from .movement import MovementIntegrator
from .world import World


class FixedRateTimer:
    """Invoke an async ``callback`` every ``interval`` seconds.

    Deadlines advance by exactly one interval per firing. When a firing
    overruns its slot the next one starts immediately and the schedule is
    re-anchored to the current time: late ticks are never replayed in a burst
    and none are skipped.
    """

    def __init__(self, interval: float, callback: Callable[[], Awaitable[None]], name: str = "timer") -> None:
        if interval <= 0:
            raise ValueError("Timer interval must be positive")
        self.interval = interval
        self.name = name
        self._callback = callback
        self._running = False
        self.fired: int = 0
        self.overruns: int = 0

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        """Stop after the current firing, if any."""

        self._running = False

    async def run(self) -> None:
        loop = asyncio.get_running_loop()
        self._running = True
        deadline = loop.time()
        while self._running:
            await self._callback()
            self.fired += 1
            deadline += self.interval
            now = loop.time()
            if deadline < now:
                self.overruns += 1
                logging.debug("%s overran its slot by %.4fs", self.name, now - deadline)
                deadline = now
            if not self._running:
                break
            await asyncio.sleep(deadline - now)


class SimulationClock:
    """Advance the world at the configured tick rate."""

    def __init__(
        self,
        world: World,
        resolver: Optional[CollisionResolver] = None,
        integrator: Optional[MovementIntegrator] = None,
    ) -> None:
        self.world = world
        self.resolver = resolver if resolver is not None else CollisionResolver(world)
        self.integrator = integrator if integrator is not None else MovementIntegrator(world)
        self.timer = FixedRateTimer(world.config.tick_interval, self._tick, name="simulation")

    def step(self) -> TickReport:
        """Run one tick: move shrimps, then resolve consumption."""

        self.world.tick += 1
        self.integrator.step(self.world.config.tick_interval)
        report = self.resolver.resolve()
        if report.kills:
            logging.info(
                "%d shrimp(s) were eaten in collisions, %d remaining",
                report.shrimps_eaten,
                self.world.player_count,
            )
        return report

    async def _tick(self) -> None:
        self.step()

    async def run(self) -> None:
        await self.timer.run()

    def stop(self) -> None:
        self.timer.stop()
