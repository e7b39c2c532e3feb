from pytest import approx

from shrimp_client.entities import EntityStore
from shrimp_client.input import InputManager, InputState


SNAPSHOT = {
    "type": "world-snapshot",
    "players": [
        {"id": "me", "x": 10, "y": 20, "size": 12, "score": 5},
        {"id": "other", "x": 30, "y": 40, "size": 30, "score": 55},
    ],
    "foods": [{"x": 1, "y": 2, "size": 4}],
}


def test_store_replaces_view_on_every_snapshot():
    store = EntityStore()
    store.update_from_snapshot(SNAPSHOT)

    assert store.find("me").score == 5
    assert len(store.foods) == 1

    store.update_from_snapshot({"players": [], "foods": []})

    assert store.find("me") is None
    assert store.foods == []


def test_leaderboard_orders_by_score():
    store = EntityStore()
    store.update_from_snapshot(SNAPSHOT)

    assert [entry.id for entry in store.leaderboard()] == ["other", "me"]
    assert [entry.id for entry in store.leaderboard(limit=1)] == ["other"]


def test_input_maps_window_to_world():
    manager = InputManager((800.0, 600.0))

    state = manager.update((200, 150), (400, 300))

    assert state.x == approx(400)
    assert state.y == approx(300)
    assert manager.last_state is state


def test_input_change_detection():
    manager = InputManager((800.0, 600.0))

    assert manager.changed(InputState(1, 2), InputState(1, 3))
    assert not manager.changed(InputState(1, 2), InputState(1, 2))
