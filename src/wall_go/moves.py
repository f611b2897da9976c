"""
Movement rule

A piece steps a single cell up, down, left or right. The step is allowed when the target cell is on the board, nobody stands there
and no wall is in between. Pieces never jump or move diagonally.

Making two steps in one turn is the state machine's business (it simply asks again after the first step).
"""

from typing import Iterable

from src.wall_go.pieces import Piece, Wall
from src.wall_go.position import Position
from src.wall_go.walls import WallLedger


def occupied_positions(pieces: Iterable[Piece]) -> set[Position]:
    return {piece.position for piece in pieces}


def get_valid_moves(
    piece: Piece, pieces: Iterable[Piece], walls: Iterable[Wall]
) -> list[Position]:
    """Legal single-step destinations, in the order up, down, left, right. An empty list just means the piece is stuck."""
    occupied = occupied_positions(pieces)
    ledger = WallLedger.from_walls(walls)
    return [
        target
        for target in piece.position.neighbors()
        if target not in occupied
        and not ledger.has_wall_between(piece.position, target)
    ]
