"""Shrimp (player) entity implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from . import utils
from .snapshot import ShrimpState


@dataclass
class Shrimp:
    """Authoritative representation of a shrimp controlled by a session."""

    id: str
    position: utils.Vec2
    size: float
    score: int = 0
    target: Optional[utils.Vec2] = field(default=None)

    def grow(self, amount: float, max_size: float) -> None:
        """Increase the size by ``amount`` without exceeding ``max_size``.

        The size never shrinks, even if ``max_size`` is below the current size.
        """

        self.size = max(self.size, min(max_size, self.size + amount))

    def add_score(self, points: int) -> None:
        """Add ``points`` to the score accumulator."""

        self.score += points

    def to_state(self) -> ShrimpState:
        """Return an immutable copy suitable for a snapshot."""

        return ShrimpState(
            id=self.id,
            x=self.position.x,
            y=self.position.y,
            size=self.size,
            score=self.score,
        )
