"""
Type definitions used across layers
"""

from enum import IntEnum, StrEnum
from typing import Final, Literal


class Player(IntEnum):
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self == Player.ONE else Player.ONE


class Phase(StrEnum):
    SETUP = "setup"
    PLAYING = "playing"
    GAME_OVER = "game over"


class Orientation(StrEnum):
    """A horizontal wall separates a cell from the one above it, a vertical wall from the one to its left."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


# Outcome of a finished game: the winning player, or a tie when both territories are the same size
TIE: Final = "tie"
Outcome = Player | Literal["tie"]
