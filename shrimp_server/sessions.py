"""Mapping between transport sessions and shrimps."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from . import protocol
from .shrimp import Shrimp
from .snapshot import WorldSnapshot
from .transport import Transport
from .world import World


class SessionRegistry:
    """Track connected sessions and translate their events into world calls.

    A session id doubles as the id of its shrimp. The registry never owns the
    shrimp; the world does. Each handler finishes its world mutation before
    the first ``await`` so no other callback sees a half-updated world.
    """

    def __init__(self, world: World, transport: Transport) -> None:
        self.world = world
        self.transport = transport
        self.sessions: Dict[str, str] = {}

    @property
    def count(self) -> int:
        return len(self.sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self.sessions

    async def on_join(self, session_id: str) -> WorldSnapshot:
        """Spawn a shrimp for ``session_id`` and send it the current world."""

        shrimp = self.world.spawn_player(session_id)
        self.sessions[session_id] = shrimp.id
        snapshot = self.world.snapshot()
        logging.info(
            "Session %s joined at (%.1f, %.1f), %d connected",
            session_id,
            shrimp.position.x,
            shrimp.position.y,
            self.count,
        )
        await self.transport.send(session_id, protocol.encode_snapshot(snapshot))
        await self._broadcast_count()
        return snapshot

    async def on_leave(self, session_id: str) -> bool:
        """Forget ``session_id`` and destroy its shrimp; repeated calls are no-ops."""

        player_id = self.sessions.pop(session_id, None)
        if player_id is None:
            return False
        self.world.remove_player(player_id)
        logging.info("Session %s left, %d connected", session_id, self.count)
        await self._broadcast_count()
        return True

    def on_input(self, session_id: str, x: float, y: float) -> Optional[Shrimp]:
        """Forward a pointer target; input for an absent shrimp is dropped."""

        player_id = self.sessions.get(session_id)
        if player_id is None:
            logging.debug("Dropped input from unknown session %s", session_id)
            return None
        shrimp = self.world.set_player_target(player_id, x, y)
        if shrimp is None:
            logging.debug("Dropped input for session %s without a live shrimp", session_id)
        return shrimp

    async def on_respawn(self, session_id: str) -> bool:
        """Give an eaten but still connected session a fresh shrimp."""

        player_id = self.sessions.get(session_id)
        if player_id is None or self.world.get_player(player_id) is not None:
            return False
        self.world.spawn_player(player_id)
        snapshot = self.world.snapshot()
        logging.info("Session %s respawned", session_id)
        await self.transport.send(session_id, protocol.encode_snapshot(snapshot))
        return True

    async def _broadcast_count(self) -> None:
        await self.transport.broadcast(protocol.encode_session_count(self.count))
