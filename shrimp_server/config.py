"""Process wide game configuration, read once at startup."""

from __future__ import annotations

from dataclasses import dataclass, fields
import math
import os
from typing import Mapping, Optional

from . import constants

MOVEMENT_MODES = ("teleport", "steer")


class ConfigError(ValueError):
    """Raised when a configuration value violates a game invariant."""


@dataclass(frozen=True)
class GameConfig:
    """Immutable set of numeric knobs for the arena simulation."""

    map_width: float = constants.MAP_WIDTH
    map_height: float = constants.MAP_HEIGHT
    spawn_margin: float = constants.SPAWN_MARGIN
    initial_size: float = constants.INITIAL_SHRIMP_SIZE
    max_size: float = constants.MAX_SHRIMP_SIZE
    food_floor: int = constants.FOOD_FLOOR
    min_food_size: float = constants.MIN_FOOD_SIZE
    max_food_size: float = constants.MAX_FOOD_SIZE
    growth_per_food: float = constants.GROWTH_PER_FOOD
    growth_per_shrimp: float = constants.GROWTH_PER_SHRIMP
    score_per_food: int = constants.SCORE_PER_FOOD
    score_per_shrimp: int = constants.SCORE_PER_SHRIMP
    tick_rate: int = constants.TICK_RATE
    broadcast_rate: int = constants.BROADCAST_RATE
    log_interval: float = constants.LOG_INTERVAL
    movement_mode: str = constants.MOVEMENT_MODE
    max_speed: float = constants.MAX_SPEED
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.validate()

    @property
    def tick_interval(self) -> float:
        """Seconds between two simulation ticks."""

        return 1.0 / self.tick_rate

    @property
    def broadcast_interval(self) -> float:
        """Seconds between two snapshot broadcasts."""

        return 1.0 / self.broadcast_rate

    def validate(self) -> None:
        """Raise :class:`ConfigError` if any invariant is violated."""

        for item in fields(self):
            value = getattr(self, item.name)
            if isinstance(value, float) and not math.isfinite(value):
                raise ConfigError(f"{item.name} must be a finite number")
        if self.map_width <= 0 or self.map_height <= 0:
            raise ConfigError("Map dimensions must be positive")
        if self.spawn_margin < 0:
            raise ConfigError("Spawn margin must not be negative")
        if 2 * self.spawn_margin > min(self.map_width, self.map_height):
            raise ConfigError("Spawn margin leaves no room to spawn entities")
        if self.initial_size <= 0:
            raise ConfigError("Initial shrimp size must be positive")
        if self.max_size < self.initial_size:
            raise ConfigError("Maximum shrimp size must be at least the initial size")
        if self.food_floor < 0:
            raise ConfigError("Food floor must not be negative")
        if self.min_food_size <= 0 or self.max_food_size < self.min_food_size:
            raise ConfigError("Food size range must be positive and ordered")
        for name in ("growth_per_food", "growth_per_shrimp", "score_per_food", "score_per_shrimp"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative")
        if self.tick_rate <= 0 or self.broadcast_rate <= 0:
            raise ConfigError("Tick and broadcast rates must be positive")
        if self.broadcast_rate > self.tick_rate:
            raise ConfigError("Broadcast rate must not exceed the simulation tick rate")
        if self.log_interval <= 0:
            raise ConfigError("Log interval must be positive")
        if self.movement_mode not in MOVEMENT_MODES:
            raise ConfigError(f"Unknown movement mode {self.movement_mode!r}")
        if self.max_speed <= 0:
            raise ConfigError("Steering speed must be positive")

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, prefix: str = constants.ENV_PREFIX
    ) -> "GameConfig":
        """Build a configuration from ``SHRIMP_*`` style environment variables.

        Every dataclass field maps to ``prefix + FIELD_NAME.upper()``. Missing
        variables keep their default; values that cannot be converted raise
        :class:`ConfigError`.
        """

        if environ is None:
            environ = os.environ
        overrides = {}
        for item in fields(cls):
            raw = environ.get(prefix + item.name.upper())
            if raw is None or raw.strip() == "":
                continue
            overrides[item.name] = _convert(item.name, item.default, raw.strip())
        return cls(**overrides)


def _convert(name: str, default: object, raw: str) -> object:
    try:
        if isinstance(default, str):
            return raw.lower()
        if isinstance(default, int) or default is None:
            return int(raw)
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"Invalid value {raw!r} for {name}") from exc
