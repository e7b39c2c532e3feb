"""Gameplay defaults shared across the server modules."""

MAP_WIDTH: float = 800.0
MAP_HEIGHT: float = 600.0
SPAWN_MARGIN: float = 20.0

INITIAL_SHRIMP_SIZE: float = 10.0
MAX_SHRIMP_SIZE: float = 100.0

FOOD_FLOOR: int = 10
MIN_FOOD_SIZE: float = 3.0
MAX_FOOD_SIZE: float = 8.0

GROWTH_PER_FOOD: float = 1.0
GROWTH_PER_SHRIMP: float = 5.0
SCORE_PER_FOOD: int = 5
SCORE_PER_SHRIMP: int = 50

TICK_RATE: int = 60
BROADCAST_RATE: int = 30
LOG_INTERVAL: float = 1.0

MOVEMENT_MODE: str = "teleport"
MAX_SPEED: float = 240.0

ENV_PREFIX: str = "SHRIMP_"
