"""Pygame based renderer for the game client."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import pygame

from .entities import FoodEntity, ShrimpEntity

GRID_SIZE = 40


class Renderer:
    """Responsible for all drawing tasks."""

    def __init__(self, screen: pygame.Surface, world_size: Tuple[float, float]) -> None:
        self.screen = screen
        self.world_size = world_size
        self.font = pygame.font.SysFont("arial", 14)
        self.hud_font = pygame.font.SysFont("arial", 18)
        self.background_color = (12, 40, 64)
        self.grid_color = (24, 56, 84)
        self.food_color = (120, 220, 110)
        self.shrimp_color = (240, 128, 128)
        self.self_color = (255, 170, 90)

    @property
    def scale(self) -> Tuple[float, float]:
        return (
            self.screen.get_width() / self.world_size[0],
            self.screen.get_height() / self.world_size[1],
        )

    def _to_screen(self, x: float, y: float) -> Tuple[int, int]:
        sx, sy = self.scale
        return int(x * sx), int(y * sy)

    def clear(self) -> None:
        self.screen.fill(self.background_color)
        width, height = self.screen.get_size()
        for x in range(0, width, GRID_SIZE):
            pygame.draw.line(self.screen, self.grid_color, (x, 0), (x, height))
        for y in range(0, height, GRID_SIZE):
            pygame.draw.line(self.screen, self.grid_color, (0, y), (width, y))

    def draw_foods(self, foods: Iterable[FoodEntity]) -> None:
        sx, _ = self.scale
        for food in foods:
            radius = max(1, int(food.size * sx))
            pygame.draw.circle(self.screen, self.food_color, self._to_screen(food.x, food.y), radius)

    def draw_shrimps(self, shrimps: Iterable[ShrimpEntity], own_id: Optional[str]) -> None:
        sx, _ = self.scale
        for shrimp in shrimps:
            color = self.self_color if shrimp.id == own_id else self.shrimp_color
            center = self._to_screen(shrimp.x, shrimp.y)
            radius = max(2, int(shrimp.size * sx))
            pygame.draw.circle(self.screen, color, center, radius)
            label = self.font.render(str(shrimp.score), True, (255, 255, 255))
            self.screen.blit(label, (center[0] - label.get_width() / 2, center[1] - radius - 16))

    def draw_hud(self, own: Optional[ShrimpEntity], session_count: int) -> None:
        if own is not None:
            text = f"Score: {own.score}  Size: {own.size:.0f}"
        else:
            text = "You were eaten - click to respawn"
        self.screen.blit(self.hud_font.render(text, True, (255, 255, 255)), (12, 10))
        players = self.hud_font.render(f"Players: {session_count}", True, (220, 220, 220))
        self.screen.blit(players, (12, 32))

    def draw_leaderboard(self, entries: List[ShrimpEntity], own_id: Optional[str]) -> None:
        x = self.screen.get_width() - 180
        y = 10
        title = self.hud_font.render("Leaderboard", True, (255, 255, 255))
        self.screen.blit(title, (x, y))
        y += 24
        for index, entry in enumerate(entries):
            name = "You" if entry.id == own_id else entry.id[:6]
            text = f"{index + 1}. {name} - {entry.score}"
            surface = self.font.render(text, True, (220, 220, 220))
            self.screen.blit(surface, (x, y))
            y += 18

    def present(self) -> None:
        pygame.display.flip()
