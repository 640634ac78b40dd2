"""Game record schemas - the current game and its players."""

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field


class Player(BaseModel):
    """A player in the current game."""
    name: str
    level: int
    points: int
    description: Optional[str] = None


class Game(BaseModel):
    """The current game record.

    Players are kept in insertion order and encoded as a JSON array, so a
    saved game always loads back with the same ordering.
    """
    players: list[Player] = Field(default_factory=list)

    def add_player(self, player: Player) -> None:
        """Append a player to the game."""
        self.players.append(player)

    def get_player(self, name: str) -> Optional[Player]:
        """Find a player by name (case-insensitive)."""
        for p in self.players:
            if p.name.lower() == name.lower():
                return p
        return None

    def leaderboard(self) -> list[Player]:
        """Players ranked by points, then level."""
        return sorted(self.players, key=lambda p: (-p.points, -p.level))
