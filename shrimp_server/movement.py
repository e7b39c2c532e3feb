"""Per-tick movement integration."""

from __future__ import annotations

from . import utils
from .world import World


class MovementIntegrator:
    """Advance every shrimp towards its stored target.

    In ``teleport`` mode positions are committed when input arrives, so a tick
    has nothing left to do. In ``steer`` mode each shrimp moves in a straight
    line by at most ``max_speed * dt`` world units per tick.
    """

    def __init__(self, world: World) -> None:
        self.world = world

    def step(self, dt: float) -> None:
        config = self.world.config
        if config.movement_mode != "steer":
            return
        max_distance = config.max_speed * dt
        for shrimp in self.world.shrimps.values():
            if shrimp.target is None:
                continue
            moved = utils.step_towards(shrimp.position, shrimp.target, max_distance)
            shrimp.position = utils.clamp_to_map(
                moved.x, moved.y, config.map_width, config.map_height
            )
