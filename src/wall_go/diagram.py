"""
Plain-text notation for a Wall Go board, used for debug output and to set up positions quickly.

Think of it as the FEN of Wall Go. For a 7x7 board the diagram has 13 lines:

* even lines (0, 2, ..., 12) are rows of cells. The cell in column c sits at character 2c and is one of
  '.' (empty), '1' (a piece of player 1) or '2' (a piece of player 2).
  The character in between two cells (2c - 1) is '|' when a vertical wall at (r, c) separates them, otherwise a space.
* odd lines (1, 3, ..., 11) sit in between row r-1 and row r. A '-' at character 2c means a horizontal wall at (r, c).

ex) a piece of player 1 on (1, 1) boxed in by four walls, with a piece of player 2 in the corner:

    . . . . . . .
      -
    .|1|. . . . .
      -
    . . . . . . .
    ...
    . . . . . . 2

Trailing whitespace does not matter (and separator lines without walls may be empty).
"""

from textwrap import dedent

from src.core.exceptions import GameStateError
from src.core.shared_types import Orientation, Player
from src.wall_go.pieces import Piece, Wall, WallSlot
from src.wall_go.position import GRID_SIZE, Position

EMPTY_CELL = "."
HORIZONTAL_WALL = "-"
VERTICAL_WALL = "|"
DIAGRAM_WIDTH = 2 * GRID_SIZE - 1
DIAGRAM_HEIGHT = 2 * GRID_SIZE - 1

CHAR_TO_PLAYER: dict[str, Player] = {str(player.value): player for player in Player}


def parse_diagram(
    diagram: str, placed_by: Player = Player.ONE
) -> tuple[list[Piece], list[Wall]]:
    """
    Read pieces and walls from a diagram.
    ---

    Pieces get ids `piece-<player>-<n>` and walls `wall-<n>`, numbered in reading order from 1.
    Diagrams carry no wall attribution, so every wall is credited to `placed_by` and has no building piece.
    """
    lines = [line.ljust(DIAGRAM_WIDTH) for line in dedent(diagram).strip("\n").split("\n")]
    if len(lines) != DIAGRAM_HEIGHT:
        raise GameStateError(
            f"A diagram has {DIAGRAM_HEIGHT} lines, got {len(lines)}."
        )
    if any(len(line.rstrip()) > DIAGRAM_WIDTH for line in lines):
        raise GameStateError(f"Diagram lines are at most {DIAGRAM_WIDTH} characters wide.")

    pieces: list[Piece] = []
    walls: list[Wall] = []
    next_id = 1
    for line_idx, line in enumerate(lines):
        # odd lines only hold horizontal walls
        if line_idx % 2 == 1:
            row = line_idx // 2 + 1
            stray = next((char for char in line[1::2] if char != " "), None)
            if stray is not None:
                raise GameStateError(
                    f"Unexpected character {stray!r} in between columns on separator line {line_idx}."
                )
            for col in range(GRID_SIZE):
                character = line[2 * col]
                if character == HORIZONTAL_WALL:
                    walls.append(
                        Wall(f"wall-{next_id}", Position(row, col), Orientation.HORIZONTAL, placed_by)
                    )
                    next_id += 1
                elif character != " ":
                    raise GameStateError(
                        f"Unexpected character {character!r} on separator line {line_idx}."
                    )
            continue

        row = line_idx // 2
        for col in range(GRID_SIZE):
            # the gap to the left of the cell may hold a vertical wall
            if col > 0:
                gap = line[2 * col - 1]
                if gap == VERTICAL_WALL:
                    walls.append(
                        Wall(f"wall-{next_id}", Position(row, col), Orientation.VERTICAL, placed_by)
                    )
                    next_id += 1
                elif gap != " ":
                    raise GameStateError(
                        f"Unexpected character {gap!r} in between cells on line {line_idx}."
                    )

            character = line[2 * col]
            if character == EMPTY_CELL:
                continue
            if character not in CHAR_TO_PLAYER:
                raise GameStateError(
                    f"Unexpected cell {character!r} on line {line_idx}. Use {EMPTY_CELL!r}, '1' or '2'."
                )
            player = CHAR_TO_PLAYER[character]
            pieces.append(Piece(f"piece-{player.value}-{next_id}", player, Position(row, col)))
            next_id += 1

    return pieces, walls


def to_diagram(pieces: list[Piece], walls: list[Wall]) -> str:
    """Reverse operation. Lines are stripped of trailing whitespace."""
    occupant = {piece.position: piece.player for piece in pieces}
    slots = {wall.slot for wall in walls}

    lines: list[str] = []
    for row in range(GRID_SIZE):
        if row > 0:
            lines.append(_separator_line(row, slots))
        lines.append(_cell_line(row, occupant, slots))
    return "\n".join(lines)


def _cell_line(
    row: int, occupant: dict[Position, Player], slots: set[WallSlot]
) -> str:
    characters: list[str] = []
    for col in range(GRID_SIZE):
        position = Position(row, col)
        if col > 0:
            is_wall = WallSlot(position, Orientation.VERTICAL) in slots
            characters.append(VERTICAL_WALL if is_wall else " ")
        player = occupant.get(position)
        characters.append(str(player.value) if player else EMPTY_CELL)
    return "".join(characters).rstrip()


def _separator_line(row: int, slots: set[WallSlot]) -> str:
    """Line in between row-1 and row"""
    characters = [
        HORIZONTAL_WALL
        if WallSlot(Position(row, col), Orientation.HORIZONTAL) in slots
        else " "
        for col in range(GRID_SIZE)
    ]
    return " ".join(characters).rstrip()
