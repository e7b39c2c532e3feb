import asyncio
import json

from shrimp_server.sessions import SessionRegistry


def decode(message: str) -> dict:
    return json.loads(message)


def test_join_sends_private_snapshot_and_count(world, transport):
    registry = SessionRegistry(world, transport)

    snapshot = asyncio.run(registry.on_join("s1"))

    state = snapshot.player("s1")
    assert [p.id for p in snapshot.players] == ["s1"]
    assert state.size == world.config.initial_size
    assert state.score == 0
    assert 0 <= state.x <= world.config.map_width
    assert 0 <= state.y <= world.config.map_height

    assert len(transport.sent) == 1
    session_id, message = transport.sent[0]
    payload = decode(message)
    assert session_id == "s1"
    assert payload["type"] == "world-snapshot"
    assert payload["players"][0]["id"] == "s1"
    assert decode(transport.broadcasts[-1]) == {"type": "session-count", "count": 1}


def test_leave_removes_player_once(world, transport):
    registry = SessionRegistry(world, transport)

    async def exercise():
        await registry.on_join("s1")
        await registry.on_join("s2")
        first = await registry.on_leave("s1")
        second = await registry.on_leave("s1")
        return first, second

    first, second = asyncio.run(exercise())

    assert (first, second) == (True, False)
    assert world.get_player("s1") is None
    assert "s1" not in registry
    assert registry.count == 1
    counts = [decode(m)["count"] for m in transport.broadcasts]
    assert counts == [1, 2, 1]


def test_leave_after_being_eaten_is_clean(world, transport):
    registry = SessionRegistry(world, transport)
    asyncio.run(registry.on_join("s1"))
    world.remove_player("s1")

    assert asyncio.run(registry.on_leave("s1")) is True
    assert registry.count == 0


def test_input_moves_player(world, transport):
    registry = SessionRegistry(world, transport)
    asyncio.run(registry.on_join("s1"))

    shrimp = registry.on_input("s1", 42.0, -7.0)

    assert shrimp is not None
    assert shrimp.position.to_tuple() == (42.0, 0.0)


def test_input_for_unknown_or_eaten_session_is_dropped(world, transport):
    registry = SessionRegistry(world, transport)
    asyncio.run(registry.on_join("s1"))
    world.remove_player("s1")

    assert registry.on_input("s1", 1, 1) is None
    assert registry.on_input("nobody", 1, 1) is None
    assert world.player_count == 0


def test_respawn_only_when_eaten(world, transport):
    registry = SessionRegistry(world, transport)
    asyncio.run(registry.on_join("s1"))

    assert asyncio.run(registry.on_respawn("s1")) is False
    world.remove_player("s1")
    assert asyncio.run(registry.on_respawn("s1")) is True
    assert world.get_player("s1").score == 0
    assert asyncio.run(registry.on_respawn("unknown")) is False
    assert transport.sent[-1][0] == "s1"
