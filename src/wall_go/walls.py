"""
Wall bookkeeping: which grid-line slots are taken, and where the selected piece may build next.

Walls are append-only. Once placed they are never moved or removed, so a ledger built from a tuple of walls never goes stale
for the state it was built from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Self

from src.core.shared_types import Orientation
from src.wall_go.pieces import Piece, Wall, WallSlot
from src.wall_go.position import GRID_SIZE, Position


def wall_slot_between(a: Position, b: Position) -> Optional[WallSlot]:
    """
    The slot a wall would occupy to block the step from `a` to `b`.
    ---

    * stepping vertically is blocked by a horizontal wall on the row of the lower cell (the greater row)
    * stepping horizontally is blocked by a vertical wall on the column of the right cell (the greater column)

    Cells that are not exactly one step apart have no slot between them.
    """
    if not a.is_adjacent(b):
        return None
    if a.row != b.row:
        return WallSlot(Position(max(a.row, b.row), a.col), Orientation.HORIZONTAL)
    return WallSlot(Position(a.row, max(a.col, b.col)), Orientation.VERTICAL)


@dataclass(frozen=True)
class WallLedger:
    """Set of occupied wall slots. Lookups are O(1), so flood fill builds one ledger instead of scanning the walls per step."""

    slots: frozenset[WallSlot]

    @classmethod
    def from_walls(cls, walls: Iterable[Wall]) -> Self:
        return cls(frozenset(wall.slot for wall in walls))

    def is_slot_occupied(self, position: Position, orientation: Orientation) -> bool:
        return WallSlot(position, orientation) in self.slots

    def has_wall_between(self, a: Position, b: Position) -> bool:
        slot = wall_slot_between(a, b)
        if slot is None:
            return False
        return slot in self.slots


def has_wall_between(walls: Iterable[Wall], a: Position, b: Position) -> bool:
    return WallLedger.from_walls(walls).has_wall_between(a, b)


def is_slot_occupied(
    walls: Iterable[Wall], position: Position, orientation: Orientation
) -> bool:
    return WallLedger.from_walls(walls).is_slot_occupied(position, orientation)


def candidate_wall_slots(position: Position) -> list[WallSlot]:
    """
    The four sides of a cell, in the order top, bottom, left, right.
    Sides on the edge of the board are skipped: the boundary already acts as a wall and cannot be built on.
    """
    row, col = position.row, position.col
    slots: list[WallSlot] = []
    if row > 0:
        slots.append(WallSlot(Position(row, col), Orientation.HORIZONTAL))
    if row < GRID_SIZE - 1:
        slots.append(WallSlot(Position(row + 1, col), Orientation.HORIZONTAL))
    if col > 0:
        slots.append(WallSlot(Position(row, col), Orientation.VERTICAL))
    if col < GRID_SIZE - 1:
        slots.append(WallSlot(Position(row, col + 1), Orientation.VERTICAL))
    return slots


def get_valid_wall_placements(piece: Piece, walls: Iterable[Wall]) -> list[WallSlot]:
    """Free slots on the sides of the cell the piece stands on."""
    ledger = WallLedger.from_walls(walls)
    return [
        slot
        for slot in candidate_wall_slots(piece.position)
        if not ledger.is_slot_occupied(slot.position, slot.orientation)
    ]
