import asyncio
import json

from shrimp_server.config import GameConfig
from shrimp_server.main import GameServer, parse_args


def make_server() -> GameServer:
    return GameServer("127.0.0.1", 0, GameConfig(food_floor=4, seed=21))


def test_health_reports_connected_sessions():
    server = make_server()
    asyncio.run(server.registry.on_join("s1"))

    assert server.health() == {"status": "ok", "playersConnected": 1}


def test_input_message_moves_player():
    server = make_server()

    async def exercise():
        await server.registry.on_join("s1")
        await server._handle_message("s1", json.dumps({"type": "input", "x": 12, "y": 34}))

    asyncio.run(exercise())

    assert server.world.get_player("s1").position.to_tuple() == (12.0, 34.0)


def test_malformed_messages_are_ignored():
    server = make_server()

    async def exercise():
        await server.registry.on_join("s1")
        before = server.world.get_player("s1").position.copy()
        for raw in ["{", "[]", json.dumps({"type": "input", "x": "a", "y": 1}), json.dumps({"type": "dance"})]:
            await server._handle_message("s1", raw)
        return before

    before = asyncio.run(exercise())

    assert server.world.get_player("s1").position == before


def test_respawn_message_restores_eaten_player():
    server = make_server()

    async def exercise():
        await server.registry.on_join("s1")
        server.world.remove_player("s1")
        await server._handle_message("s1", json.dumps({"type": "respawn"}))

    asyncio.run(exercise())

    assert server.world.get_player("s1") is not None


def test_parse_args_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    args = parse_args([])

    assert args.host == "0.0.0.0"
    assert args.port == 4000
    assert args.log_level == "INFO"


def test_huge_coordinates_clamp_to_map_edge():
    server = make_server()
    raw = '{"type": "input", "x": 1' + "0" * 400 + ', "y": -1' + "0" * 400 + "}"

    async def exercise():
        await server.registry.on_join("s1")
        await server._handle_message("s1", raw)

    asyncio.run(exercise())

    shrimp = server.world.get_player("s1")
    assert shrimp.position.to_tuple() == (server.config.map_width, 0.0)
