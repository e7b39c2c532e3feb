"""JSON protocol helpers for the websocket transport."""

from __future__ import annotations

import json
import math
from typing import Tuple

from .config import GameConfig
from .snapshot import WorldSnapshot

WELCOME = "welcome"
WORLD_SNAPSHOT = "world-snapshot"
SESSION_COUNT = "session-count"
INPUT = "input"
RESPAWN = "respawn"


def parse_client_message(message: str | bytes) -> dict:
    """Parse a raw client ``message`` into a Python dictionary."""

    try:
        payload = json.loads(message)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError("Invalid client message") from exc
    if not isinstance(payload, dict):
        raise ValueError("Client message must be a JSON object")
    return payload


def _coordinate(payload: dict, key: str) -> float:
    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Input field {key!r} must be a number")
    try:
        coordinate = float(value)
    except OverflowError:
        # Integers beyond float range clamp to the map edge like infinities do.
        coordinate = math.inf if value > 0 else -math.inf
    if math.isnan(coordinate):
        raise ValueError(f"Input field {key!r} must not be NaN")
    return coordinate


def parse_input(payload: dict) -> Tuple[float, float]:
    """Return the ``(x, y)`` pointer target of an ``input`` message."""

    return _coordinate(payload, "x"), _coordinate(payload, "y")


def encode_snapshot(snapshot: WorldSnapshot) -> str:
    """Encode a world snapshot for broadcasting to clients."""

    message = {"type": WORLD_SNAPSHOT}
    message.update(snapshot.to_dict())
    return json.dumps(message)


def encode_session_count(count: int) -> str:
    return json.dumps({"type": SESSION_COUNT, "count": count})


def encode_welcome(session_id: str, config: GameConfig) -> str:
    """Encode the welcome payload sent upon connection."""

    return json.dumps(
        {
            "type": WELCOME,
            "id": session_id,
            "mapWidth": config.map_width,
            "mapHeight": config.map_height,
        }
    )
