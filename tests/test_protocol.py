import json

import pytest

from shrimp_server import protocol
from shrimp_server.config import GameConfig


def test_parse_client_message_accepts_objects():
    assert protocol.parse_client_message('{"type": "input", "x": 1, "y": 2}')["type"] == "input"


@pytest.mark.parametrize("raw", ["not json", "[1, 2]", "42", b"\xff\xfe"])
def test_parse_client_message_rejects_garbage(raw):
    with pytest.raises(ValueError):
        protocol.parse_client_message(raw)


def test_parse_input_returns_floats():
    assert protocol.parse_input({"x": 3, "y": 4.5}) == (3.0, 4.5)


@pytest.mark.parametrize(
    "payload",
    [
        {"x": "1", "y": 2},
        {"x": 1},
        {"x": True, "y": 2},
        {"x": float("nan"), "y": 0},
        {"x": None, "y": None},
    ],
)
def test_parse_input_rejects_bad_coordinates(payload):
    with pytest.raises(ValueError):
        protocol.parse_input(payload)


def test_parse_input_keeps_out_of_range_magnitudes():
    huge = int("1" + "0" * 400)

    assert protocol.parse_input({"x": huge, "y": -huge}) == (float("inf"), float("-inf"))
    assert protocol.parse_input({"x": float("inf"), "y": 5}) == (float("inf"), 5.0)


def test_parse_input_accepts_huge_integer_from_json():
    payload = protocol.parse_client_message('{"type": "input", "x": 1' + "0" * 400 + ', "y": 5}')

    assert protocol.parse_input(payload) == (float("inf"), 5.0)


def test_encode_session_count():
    assert json.loads(protocol.encode_session_count(3)) == {"type": "session-count", "count": 3}


def test_encode_welcome_carries_map_size():
    payload = json.loads(protocol.encode_welcome("abc", GameConfig(map_width=640, map_height=480)))

    assert payload == {"type": "welcome", "id": "abc", "mapWidth": 640, "mapHeight": 480}


def test_encode_snapshot_matches_wire_shape(world):
    world.spawn_player("p")
    payload = json.loads(protocol.encode_snapshot(world.snapshot()))

    assert set(payload) == {"type", "players", "foods"}
    assert payload["players"][0]["id"] == "p"
