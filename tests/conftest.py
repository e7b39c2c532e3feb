import random
import sys
from pathlib import Path
from typing import List, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from shrimp_server.config import GameConfig  # noqa: E402
from shrimp_server.world import World  # noqa: E402


class RecordingTransport:
    """Transport double that keeps every outbound message."""

    def __init__(self) -> None:
        self.sent: List[Tuple[str, str]] = []
        self.broadcasts: List[str] = []

    async def send(self, session_id: str, message: str) -> None:
        self.sent.append((session_id, message))

    async def broadcast(self, message: str) -> None:
        self.broadcasts.append(message)


@pytest.fixture
def config() -> GameConfig:
    return GameConfig(seed=1234)


@pytest.fixture
def world(config: GameConfig) -> World:
    return World(config, rng=random.Random(1234))


@pytest.fixture
def empty_world() -> World:
    """World without any food so collision tests control every entity."""

    return World(GameConfig(food_floor=0, seed=99))


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()
