"""Authoritative game world state."""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional

from . import utils
from .config import GameConfig
from .food import Food
from .shrimp import Shrimp
from .snapshot import WorldSnapshot


class World:
    """Owns every shrimp and food item plus the random placement helpers.

    A single instance is shared by the clock, the resolver and the session
    registry. All access happens from one event loop, so no locking is done.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.tick: int = 0
        self.shrimps: Dict[str, Shrimp] = {}
        self.foods: Dict[int, Food] = {}
        self.spawn_consumables(config.food_floor)

    def random_position(self) -> utils.Vec2:
        """Return a random point inset from the map edges by the spawn margin."""

        return utils.random_point_in_map(
            self.rng, self.config.map_width, self.config.map_height, self.config.spawn_margin
        )

    def spawn_player(self, session_id: str) -> Shrimp:
        """Create a fresh shrimp for ``session_id``, replacing any stale one."""

        if self.remove_player(session_id):
            logging.warning("Replaced existing shrimp for session %s", session_id)
        position = self.random_position()
        shrimp = Shrimp(
            id=session_id,
            position=position,
            size=self.config.initial_size,
            target=position.copy(),
        )
        self.shrimps[session_id] = shrimp
        logging.debug("Shrimp added: %s at (%.1f, %.1f)", session_id, position.x, position.y)
        return shrimp

    def remove_player(self, session_id: str) -> bool:
        """Remove the shrimp of ``session_id``; return whether one existed."""

        return self.shrimps.pop(session_id, None) is not None

    def get_player(self, session_id: str) -> Optional[Shrimp]:
        return self.shrimps.get(session_id)

    def set_player_target(self, session_id: str, x: float, y: float) -> Optional[Shrimp]:
        """Record the pointer target of ``session_id``.

        The point is clamped to the map. In ``teleport`` mode the shrimp is
        moved there immediately; in ``steer`` mode the movement integrator
        walks it there over the following ticks. Returns ``None`` when the
        session has no live shrimp.
        """

        shrimp = self.shrimps.get(session_id)
        if shrimp is None:
            return None
        target = utils.clamp_to_map(x, y, self.config.map_width, self.config.map_height)
        shrimp.target = target
        if self.config.movement_mode == "teleport":
            shrimp.position = target.copy()
        return shrimp

    def spawn_consumables(self, count: int) -> List[Food]:
        """Append ``count`` randomly placed and sized food items."""

        spawned = []
        for _ in range(max(0, count)):
            food = Food.spawn_random(self.rng, self.config)
            self.foods[food.id] = food
            spawned.append(food)
        return spawned

    def add_food(self, food: Food) -> Food:
        """Insert an already constructed food item."""

        self.foods[food.id] = food
        return food

    def remove_consumable(self, food_id: int) -> bool:
        return self.foods.pop(food_id, None) is not None

    @property
    def player_count(self) -> int:
        return len(self.shrimps)

    @property
    def food_count(self) -> int:
        return len(self.foods)

    def snapshot(self) -> WorldSnapshot:
        """Return an immutable copy of the current world."""

        return WorldSnapshot(
            tick=self.tick,
            players=tuple(shrimp.to_state() for shrimp in self.shrimps.values()),
            foods=tuple(food.to_state() for food in self.foods.values()),
        )
