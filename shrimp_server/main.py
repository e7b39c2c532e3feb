"""Entry point for the asyncio based game server."""

from __future__ import annotations

import argparse
import asyncio
from http import HTTPStatus
import json
import logging
import os
from typing import Optional

import websockets
from websockets.asyncio.server import ServerConnection, serve
from websockets.http11 import Request, Response

from . import protocol
from .broadcast import BroadcastGate
from .clock import FixedRateTimer, SimulationClock
from .config import GameConfig
from .sessions import SessionRegistry
from .transport import WebSocketTransport
from .world import World


class GameServer:
    """High level orchestration of the world simulation and websocket IO."""

    def __init__(self, host: str, port: int, config: Optional[GameConfig] = None) -> None:
        self.host = host
        self.port = port
        self.config = config if config is not None else GameConfig()
        self.world = World(self.config)
        self.transport = WebSocketTransport()
        self.registry = SessionRegistry(self.world, self.transport)
        self.clock = SimulationClock(self.world)
        self.gate = BroadcastGate(self.world, self.registry, self.transport)
        self.stats_timer = FixedRateTimer(self.config.log_interval, self._log_stats, name="stats")

    async def start(self) -> None:
        """Start the websocket server together with the simulation timers."""

        async with serve(
            self._handle_client, self.host, self.port, process_request=self._process_request
        ):
            logging.info("Server listening on %s:%s", self.host, self.port)
            await asyncio.gather(self.clock.run(), self.gate.run(), self.stats_timer.run())

    def stop(self) -> None:
        self.clock.stop()
        self.gate.stop()
        self.stats_timer.stop()

    def health(self) -> dict:
        return {"status": "ok", "playersConnected": self.registry.count}

    def _process_request(self, connection: ServerConnection, request: Request) -> Optional[Response]:
        if request.path == "/health":
            return connection.respond(HTTPStatus.OK, json.dumps(self.health()) + "\n")
        return None

    async def _log_stats(self) -> None:
        logging.info(
            "Game update: %d shrimps, %d food items, tick %d",
            self.world.player_count,
            self.world.food_count,
            self.world.tick,
        )

    async def _handle_client(self, websocket: ServerConnection) -> None:
        session_id = str(websocket.id)
        self.transport.register(session_id, websocket)
        try:
            await websocket.send(protocol.encode_welcome(session_id, self.config))
            await self.registry.on_join(session_id)
            async for message in websocket:
                await self._handle_message(session_id, message)
        except websockets.ConnectionClosed:
            logging.info("Client %s disconnected", session_id)
        finally:
            self.transport.unregister(session_id)
            await self.registry.on_leave(session_id)

    async def _handle_message(self, session_id: str, message: str | bytes) -> None:
        try:
            payload = protocol.parse_client_message(message)
            kind = payload.get("type")
            if kind == protocol.INPUT:
                x, y = protocol.parse_input(payload)
                self.registry.on_input(session_id, x, y)
            elif kind == protocol.RESPAWN:
                await self.registry.on_respawn(session_id)
        except ValueError as exc:
            logging.debug("Ignored message from %s: %s", session_id, exc)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the shrimp arena server")
    parser.add_argument("--host", default="0.0.0.0", help="Host interface to bind to")
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("PORT", 4000)),
        help="Port to listen on (defaults to $PORT or 4000)",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    server = GameServer(args.host, args.port, GameConfig.from_env())
    try:
        asyncio.run(server.start())
    except KeyboardInterrupt:
        logging.info("Server stopped")


if __name__ == "__main__":
    main()
