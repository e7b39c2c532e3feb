"""Immutable point-in-time views of the world."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class ShrimpState:
    id: str
    x: float
    y: float
    size: float
    score: int

    def to_dict(self) -> Dict[str, float | int | str]:
        return {"id": self.id, "x": self.x, "y": self.y, "size": self.size, "score": self.score}


@dataclass(frozen=True)
class FoodState:
    x: float
    y: float
    size: float

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "size": self.size}


@dataclass(frozen=True)
class WorldSnapshot:
    """All live shrimps and foods at a given tick.

    The order of both sequences follows the insertion order of the world's
    stores and carries no meaning for consumers.
    """

    tick: int
    players: Tuple[ShrimpState, ...]
    foods: Tuple[FoodState, ...]

    def player(self, player_id: str) -> Optional[ShrimpState]:
        """Return the state of ``player_id`` or ``None`` if it is not alive."""

        for state in self.players:
            if state.id == player_id:
                return state
        return None

    def to_dict(self) -> dict:
        """Serialise to the ``{players, foods}`` wire shape."""

        return {
            "players": [state.to_dict() for state in self.players],
            "foods": [state.to_dict() for state in self.foods],
        }
