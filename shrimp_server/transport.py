"""Delivery of encoded messages to connected sessions."""

from __future__ import annotations

import logging
from typing import Dict, Protocol

import websockets
from websockets.asyncio.server import ServerConnection
from websockets.asyncio.server import broadcast as fan_out


class Transport(Protocol):
    """What the core needs from the network layer."""

    async def send(self, session_id: str, message: str) -> None:
        """Deliver ``message`` to a single session."""

    async def broadcast(self, message: str) -> None:
        """Deliver ``message`` to every connected session."""


class WebSocketTransport:
    """:class:`Transport` backed by live ``websockets`` connections."""

    def __init__(self) -> None:
        self.connections: Dict[str, ServerConnection] = {}

    def register(self, session_id: str, websocket: ServerConnection) -> None:
        self.connections[session_id] = websocket

    def unregister(self, session_id: str) -> None:
        self.connections.pop(session_id, None)

    async def send(self, session_id: str, message: str) -> None:
        websocket = self.connections.get(session_id)
        if websocket is None:
            return
        try:
            await websocket.send(message)
        except websockets.ConnectionClosed:
            # The connection handler cleans up once its receive loop ends.
            logging.debug("Dropped message for closed session %s", session_id)

    async def broadcast(self, message: str) -> None:
        if self.connections:
            fan_out(list(self.connections.values()), message)
