"""Translate local input into commands for the server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass
class InputState:
    """Pointer target in world coordinates."""

    x: float
    y: float


class InputManager:
    """Map the mouse position from window pixels to world coordinates."""

    def __init__(self, world_size: Tuple[float, float]) -> None:
        self.world_size = world_size
        self._last_state = InputState(0.0, 0.0)

    @property
    def last_state(self) -> InputState:
        return self._last_state

    def update(self, mouse_pos: Tuple[int, int], viewport_size: Tuple[int, int]) -> InputState:
        scale_x = self.world_size[0] / viewport_size[0]
        scale_y = self.world_size[1] / viewport_size[1]
        self._last_state = InputState(mouse_pos[0] * scale_x, mouse_pos[1] * scale_y)
        return self._last_state

    def changed(self, state: InputState, previous: InputState) -> bool:
        return (state.x, state.y) != (previous.x, previous.y)
