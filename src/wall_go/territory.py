"""
Territory: who controls which part of the board
-----

Everything here is built on one primitive, the flood fill. Starting from a cell we walk to every neighbouring cell that is not
cut off by a wall, until nothing new can be reached. The result is the connected region that contains the starting cell.

* A piece is *isolated* when no other piece stands in its region.
* The game ends once every piece is isolated.
* A player's score is the total size of the regions their pieces ended up in.
"""

from typing import Iterable, Optional, Sequence

from src.core.shared_types import TIE, Outcome, Player
from src.wall_go.pieces import Piece, PlayerCounts, Wall
from src.wall_go.position import BOARD_AREA, Position
from src.wall_go.walls import WallLedger


def flood_fill(
    start: Position,
    walls: Iterable[Wall] | WallLedger,
    visited: Optional[set[Position]] = None,
) -> set[Position]:
    """
    Connected region containing `start`.
    ---

    Iterative depth-first search with an explicit stack. Cells already in `visited` are treated as explored and are not returned
    (pass a shared set to partition the board without walking the same region twice). `visited` gets updated in place.
    """
    ledger = walls if isinstance(walls, WallLedger) else WallLedger.from_walls(walls)
    seen = visited if visited is not None else set()
    region: set[Position] = set()
    stack = [start]

    while stack:
        current = stack.pop()
        if current in seen or not current.is_valid():
            continue

        seen.add(current)
        region.add(current)

        for neighbor in current.neighbors():
            if neighbor in seen:
                continue
            if ledger.has_wall_between(current, neighbor):
                continue
            stack.append(neighbor)

    return region


def is_isolated(piece: Piece, pieces: Iterable[Piece], walls: Iterable[Wall]) -> bool:
    """No other piece can be reached from this piece's cell."""
    return _is_isolated(piece, pieces, WallLedger.from_walls(walls))


def all_isolated(pieces: Sequence[Piece], walls: Iterable[Wall]) -> bool:
    """The game-over condition. Only evaluated after a wall goes up; a move alone never splits a region."""
    ledger = WallLedger.from_walls(walls)
    return all(_is_isolated(piece, pieces, ledger) for piece in pieces)


def calculate_scores(pieces: Sequence[Piece], walls: Iterable[Wall]) -> PlayerCounts:
    """
    Partition the board into regions, one flood fill per piece, and credit each region's size to the player owning it.

    NOTE: a region already claimed by an earlier piece is skipped. Once all pieces are isolated this never happens, because
    every region holds exactly one piece. Empty regions (no piece at all) count for nobody.
    """
    ledger = WallLedger.from_walls(walls)
    scores = PlayerCounts()
    claimed: set[Position] = set()
    for piece in pieces:
        if piece.position in claimed:
            continue
        region = flood_fill(piece.position, ledger, claimed)
        scores = scores.add(piece.player, len(region))
    return scores


def region_sizes(pieces: Sequence[Piece], walls: Iterable[Wall]) -> dict[str, int]:
    """Size of the region each piece currently stands in (pieces sharing a region report the same size)."""
    ledger = WallLedger.from_walls(walls)
    return {piece.id: len(flood_fill(piece.position, ledger)) for piece in pieces}


def enclosed_regions(
    pieces: Sequence[Piece], walls: Sequence[Wall]
) -> dict[Position, Player]:
    """
    Cells to shade in a player's colour.
    ---

    A cell is shaded when it lies in the region of an isolated piece AND that region is smaller than the whole board. A lone piece
    roaming the full open board is isolated, but nothing is actually enclosed yet.

    This is presentation only: scoring counts an isolated region regardless of its size.
    """
    if not walls:
        return {}

    ledger = WallLedger.from_walls(walls)
    enclosed: dict[Position, Player] = {}
    for piece in pieces:
        if not _is_isolated(piece, pieces, ledger):
            continue
        region = flood_fill(piece.position, ledger)
        if len(region) >= BOARD_AREA:
            continue
        for cell in region:
            enclosed[cell] = piece.player
    return enclosed


def determine_winner(scores: PlayerCounts) -> Outcome:
    if scores.player1 > scores.player2:
        return Player.ONE
    if scores.player2 > scores.player1:
        return Player.TWO
    return TIE


def _is_isolated(piece: Piece, pieces: Iterable[Piece], ledger: WallLedger) -> bool:
    region = flood_fill(piece.position, ledger)
    return not any(
        other.position in region for other in pieces if other.id != piece.id
    )
