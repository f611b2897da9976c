"""Defines the things that live on the board: pieces, walls and the per-player tallies"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from src.core.shared_types import Orientation, Player
from src.wall_go.position import Position

PIECES_PER_PLAYER = 4


@dataclass(frozen=True)
class Piece:
    id: str
    player: Player
    position: Position

    def moved_to(self, position: Position) -> Piece:
        return replace(self, position=position)


@dataclass(frozen=True)
class WallSlot:
    """
    A grid-line segment a wall can occupy.
    ---

    * horizontal at (r, c): between cell (r-1, c) and cell (r, c)
    * vertical at (r, c): between cell (r, c-1) and cell (r, c)
    """

    position: Position
    orientation: Orientation


@dataclass(frozen=True)
class Wall:
    id: str
    position: Position
    orientation: Orientation
    placed_by: Player
    # The piece that built the wall (used for colouring). None for walls that were not placed during play.
    piece_id: Optional[str] = None

    @property
    def slot(self) -> WallSlot:
        return WallSlot(self.position, self.orientation)


@dataclass(frozen=True)
class PlayerCounts:
    """A number per player. Used both for the setup placement counters and for the final scores."""

    player1: int = 0
    player2: int = 0

    def get(self, player: Player) -> int:
        return self.player1 if player == Player.ONE else self.player2

    def add(self, player: Player, amount: int = 1) -> PlayerCounts:
        if player == Player.ONE:
            return replace(self, player1=self.player1 + amount)
        return replace(self, player2=self.player2 + amount)

    @property
    def total(self) -> int:
        return self.player1 + self.player2
