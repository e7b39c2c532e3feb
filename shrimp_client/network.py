"""Websocket networking client."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, Optional

from websockets.asyncio.client import ClientConnection, connect
from websockets.exceptions import ConnectionClosed

from .input import InputState


class NetworkClient:
    """Asynchronous websocket client that exchanges snapshots with the server."""

    def __init__(self, uri: str) -> None:
        self.uri = uri
        self.websocket: Optional[ClientConnection] = None
        self._incoming: asyncio.Queue[Dict[str, Any]] = asyncio.Queue()
        self._receiver_task: Optional[asyncio.Task[None]] = None

    async def connect(self) -> Dict[str, Any]:
        """Connect and return the server's ``welcome`` message."""

        self.websocket = await connect(self.uri)
        welcome = await self._recv_json()
        self._receiver_task = asyncio.create_task(self._receiver_loop())
        return welcome

    async def _receiver_loop(self) -> None:
        assert self.websocket is not None
        try:
            async for message in self.websocket:
                try:
                    payload = json.loads(message)
                except json.JSONDecodeError:
                    continue
                await self._incoming.put(payload)
        except ConnectionClosed:
            pass
        finally:
            await self._incoming.put({"type": "disconnect"})

    async def _send_json(self, payload: Dict[str, Any]) -> None:
        if self.websocket is None:
            raise RuntimeError("Client is not connected")
        await self.websocket.send(json.dumps(payload))

    async def _recv_json(self) -> Dict[str, Any]:
        if self.websocket is None:
            raise RuntimeError("Client is not connected")
        message = await self.websocket.recv()
        return json.loads(message)

    async def send_input(self, state: InputState) -> None:
        await self._send_json({"type": "input", "x": state.x, "y": state.y})

    async def send_respawn(self) -> None:
        await self._send_json({"type": "respawn"})

    def drain(self) -> list[Dict[str, Any]]:
        """Return every message received since the last call."""

        messages = []
        while not self._incoming.empty():
            messages.append(self._incoming.get_nowait())
        return messages

    async def close(self) -> None:
        if self.websocket is not None:
            await self.websocket.close()
        if self._receiver_task is not None:
            await self._receiver_task
