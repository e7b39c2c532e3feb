"""Food entity definition."""

from __future__ import annotations

from dataclasses import dataclass
import itertools
import random

from . import utils
from .config import GameConfig
from .snapshot import FoodState

_id_counter = itertools.count(1)


@dataclass(frozen=True)
class Food:
    """A static consumable that shrimps eat to grow.

    ``size`` is drawn once at spawn time and never changes.
    """

    id: int
    x: float
    y: float
    size: float

    @classmethod
    def spawn_random(cls, rng: random.Random, config: GameConfig) -> "Food":
        """Create a food item at a random inset position with a random size."""

        point = utils.random_point_in_map(
            rng, config.map_width, config.map_height, config.spawn_margin
        )
        return cls(
            id=next(_id_counter),
            x=point.x,
            y=point.y,
            size=rng.uniform(config.min_food_size, config.max_food_size),
        )

    @classmethod
    def at(cls, x: float, y: float, size: float) -> "Food":
        """Create a food item at a specific position."""

        return cls(id=next(_id_counter), x=x, y=y, size=size)

    def to_state(self) -> FoodState:
        return FoodState(x=self.x, y=self.y, size=self.size)
