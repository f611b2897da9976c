"""Board positions shared by the tests. Diagrams use the notation of src/wall_go/diagram.py."""

from src.wall_go.position import GRID_SIZE, Position

# Player 1 lines up on the top row, player 2 on the bottom row. Placement alternates, player 1 first.
SETUP_PLACEMENTS: list[Position] = [
    position
    for col in range(0, GRID_SIZE, 2)
    for position in (Position(0, col), Position(GRID_SIZE - 1, col))
]

# Player 1 on (1, 1) boxed in by four walls, player 2 in the bottom right corner with the rest of the board.
ENCLOSED = """
. . . . . . .
  -
.|1|. . . . .
  -
. . . . . . .

. . . . . . .

. . . . . . .

. . . . . . .

. . . . . . 2
"""

# Two regions: 25 cells for player 1 (rows 0-2 and the left half of row 3), 24 cells for player 2.
PARTITIONED = """
1 . . . . . .

. . . . . . .

. . . . . . .
        - - -
. . . .|. 2 .
- - - -
. . . . . . .

. . . . . . .

. . . . . . .
"""

# Same as PARTITIONED, minus the vertical wall at (3, 4). Player 2 can close it off by stepping to (3, 4) and building on its left.
ALMOST_PARTITIONED = """
1 . . . . . .

. . . . . . .

. . . . . . .
        - - -
. . . . . 2 .
- - - -
. . . . . . .

. . . . . . .

. . . . . . .
"""

# Both players boxed into a corner cell. The 47 cells in the middle belong to nobody.
CORNERS = """
1|. . . . . .
-
. . . . . . .

. . . . . . .

. . . . . . .

. . . . . . .

. . . . . . .
            -
. . . . . .|2
"""
