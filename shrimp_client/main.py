"""Entry point for the pygame based client."""

from __future__ import annotations

import argparse
import asyncio

import pygame

from .entities import EntityStore
from .input import InputManager
from .network import NetworkClient
from .render import Renderer


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the shrimp arena client")
    parser.add_argument("--host", default="127.0.0.1", help="Server host")
    parser.add_argument("--port", type=int, default=4000, help="Server port")
    parser.add_argument("--width", type=int, default=800, help="Window width")
    parser.add_argument("--height", type=int, default=600, help="Window height")
    return parser.parse_args()


async def run_client(args: argparse.Namespace) -> None:
    network = NetworkClient(f"ws://{args.host}:{args.port}")
    welcome = await network.connect()
    own_id = welcome.get("id")
    world_size = (float(welcome.get("mapWidth", 800)), float(welcome.get("mapHeight", 600)))

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Shrimp Arena")
    renderer = Renderer(screen, world_size)
    clock = pygame.time.Clock()

    store = EntityStore()
    input_manager = InputManager(world_size)
    running = True

    while running:
        clock.tick(60)
        respawn_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                respawn_requested = True

        for message in network.drain():
            kind = message.get("type")
            if kind == "world-snapshot":
                store.update_from_snapshot(message)
            elif kind == "session-count":
                store.session_count = int(message.get("count", 0))
            elif kind == "disconnect":
                running = False

        own = store.find(own_id)
        if own is None and respawn_requested:
            await network.send_respawn()
        previous = input_manager.last_state
        state = input_manager.update(pygame.mouse.get_pos(), screen.get_size())
        if own is not None and input_manager.changed(state, previous):
            await network.send_input(state)

        renderer.clear()
        renderer.draw_foods(store.foods)
        renderer.draw_shrimps(store.shrimps, own_id)
        renderer.draw_hud(own, store.session_count)
        renderer.draw_leaderboard(store.leaderboard(), own_id)
        renderer.present()
        await asyncio.sleep(0)

    await network.close()
    pygame.quit()


def main() -> None:
    args = parse_args()
    asyncio.run(run_client(args))


if __name__ == "__main__":
    main()
