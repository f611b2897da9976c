"""
A cell on the board

(placed in its own module as every other module in the rules engine needs to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Wall Go is always played on a 7x7 grid.
GRID_SIZE = 7
BOARD_AREA = GRID_SIZE * GRID_SIZE

Vector = tuple[int, int]

# up, down, left, right. The order keeps flood fill traversal deterministic.
DIRECTIONS: tuple[Vector, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def is_valid(self) -> bool:
        return (0 <= self.row < GRID_SIZE) and (0 <= self.col < GRID_SIZE)

    def shifted(self, delta: Vector) -> Position:
        d_row, d_col = delta
        return Position(self.row + d_row, self.col + d_col)

    def neighbors(self) -> list[Position]:
        """The (up to four) cells sharing an edge with this one. Cells off the board are left out."""
        candidates = (self.shifted(delta) for delta in DIRECTIONS)
        return [candidate for candidate in candidates if candidate.is_valid()]

    def is_adjacent(self, other: Position) -> bool:
        """Exactly one step away along a row or a column (no diagonals)."""
        return abs(self.row - other.row) + abs(self.col - other.col) == 1


def all_positions() -> list[Position]:
    """Every cell of the board, row by row."""
    return [Position(row, col) for row in range(GRID_SIZE) for col in range(GRID_SIZE)]
