"""Collision detection and consumption rules.

Two hit tests are used on purpose:

* shrimp vs food collides when the centre distance is below the *sum* of both
  sizes, which is generous towards the shrimp;
* shrimp vs shrimp collides only below *half* the size sum, so players must
  overlap substantially before one can eat the other.

All pair generation is brute force. Candidate pairs for the shrimp pass come
from a :class:`PairScanner` so a spatial index can be plugged in later without
touching the consumption rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterator, List, Optional, Protocol, Sequence, Set, Tuple

from .food import Food
from .shrimp import Shrimp
from .world import World


def _distance_sq(ax: float, ay: float, bx: float, by: float) -> float:
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


def touches_food(shrimp: Shrimp, food: Food) -> bool:
    """Return ``True`` if ``shrimp`` is close enough to eat ``food``."""

    reach = shrimp.size + food.size
    return _distance_sq(shrimp.position.x, shrimp.position.y, food.x, food.y) < reach * reach


def overlaps(a: Shrimp, b: Shrimp) -> bool:
    """Return ``True`` if two shrimps overlap enough for one to eat the other."""

    reach = (a.size + b.size) / 2
    return _distance_sq(a.position.x, a.position.y, b.position.x, b.position.y) < reach * reach


class PairScanner(Protocol):
    def pairs(self, shrimps: Sequence[Shrimp]) -> Iterator[Tuple[int, int]]:
        """Yield ``(i, j)`` index pairs with ``i < j`` in ascending order."""


class BruteForcePairs:
    """Every unordered pair, O(n^2). Fine for tens of players."""

    def pairs(self, shrimps: Sequence[Shrimp]) -> Iterator[Tuple[int, int]]:
        count = len(shrimps)
        for i in range(count):
            for j in range(i + 1, count):
                yield i, j


@dataclass
class TickReport:
    """What happened during one resolver pass."""

    foods_eaten: int = 0
    kills: List[Tuple[str, str]] = field(default_factory=list)
    foods_spawned: int = 0

    @property
    def shrimps_eaten(self) -> int:
        return len(self.kills)


class CollisionResolver:
    """Apply food and player consumption to a :class:`World` once per tick."""

    def __init__(self, world: World, scanner: Optional[PairScanner] = None) -> None:
        self.world = world
        self.scanner: PairScanner = scanner if scanner is not None else BruteForcePairs()

    def resolve(self) -> TickReport:
        report = TickReport()
        self._resolve_food(report)
        self._resolve_shrimps(report)
        self._replenish(report)
        return report

    def _resolve_food(self, report: TickReport) -> None:
        world = self.world
        config = world.config
        for shrimp in world.shrimps.values():
            # Replacement food spawned while this shrimp scans is left for the
            # next shrimp; eaten food is already gone from the store.
            for food in list(world.foods.values()):
                if not touches_food(shrimp, food):
                    continue
                world.remove_consumable(food.id)
                shrimp.grow(config.growth_per_food, config.max_size)
                shrimp.add_score(config.score_per_food)
                report.foods_eaten += 1
                report.foods_spawned += len(world.spawn_consumables(1))
                logging.debug("Shrimp %s ate food, new size: %s", shrimp.id, shrimp.size)

    def _resolve_shrimps(self, report: TickReport) -> None:
        world = self.world
        config = world.config
        shrimps = list(world.shrimps.values())
        eaten: Set[str] = set()
        fed: Set[str] = set()
        for i, j in self.scanner.pairs(shrimps):
            a, b = shrimps[i], shrimps[j]
            if a.id in eaten or b.id in eaten:
                continue
            if a.size == b.size:
                continue
            winner, loser = (a, b) if a.size > b.size else (b, a)
            if winner.id in fed:
                continue
            if not overlaps(a, b):
                continue
            winner.grow(config.growth_per_shrimp, config.max_size)
            winner.add_score(config.score_per_shrimp)
            world.remove_player(loser.id)
            eaten.add(loser.id)
            fed.add(winner.id)
            report.kills.append((winner.id, loser.id))
            logging.info("Shrimp %s ate shrimp %s, new size: %s", winner.id, loser.id, winner.size)

    def _replenish(self, report: TickReport) -> None:
        missing = self.world.config.food_floor - self.world.food_count
        if missing > 0:
            report.foods_spawned += len(self.world.spawn_consumables(missing))
