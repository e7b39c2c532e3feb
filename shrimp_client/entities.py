"""Client side entity representations mirroring the server state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class ShrimpEntity:
    """Renderable shrimp state synchronised from the server."""

    id: str
    x: float
    y: float
    size: float
    score: int

    @classmethod
    def from_payload(cls, payload: dict) -> "ShrimpEntity":
        return cls(
            id=str(payload["id"]),
            x=float(payload.get("x", 0.0)),
            y=float(payload.get("y", 0.0)),
            size=float(payload.get("size", 0.0)),
            score=int(payload.get("score", 0)),
        )


@dataclass
class FoodEntity:
    """Renderable food state."""

    x: float
    y: float
    size: float

    @classmethod
    def from_payload(cls, payload: dict) -> "FoodEntity":
        return cls(
            x=float(payload.get("x", 0.0)),
            y=float(payload.get("y", 0.0)),
            size=float(payload.get("size", 0.0)),
        )


class EntityStore:
    """Latest world view received from the server."""

    def __init__(self) -> None:
        self.shrimps: List[ShrimpEntity] = []
        self.foods: List[FoodEntity] = []
        self.session_count: int = 0

    def update_from_snapshot(self, snapshot: dict) -> None:
        # Foods carry no id, so every snapshot replaces the whole view.
        self.shrimps = [ShrimpEntity.from_payload(item) for item in snapshot.get("players", [])]
        self.foods = [FoodEntity.from_payload(item) for item in snapshot.get("foods", [])]

    def find(self, shrimp_id: Optional[str]) -> Optional[ShrimpEntity]:
        for shrimp in self.shrimps:
            if shrimp.id == shrimp_id:
                return shrimp
        return None

    def leaderboard(self, limit: int = 5) -> List[ShrimpEntity]:
        return sorted(self.shrimps, key=lambda s: (s.score, s.size), reverse=True)[:limit]
