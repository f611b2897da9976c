"""
The game state machine is the entrypoint into the domain layer for the service layer.
-----

A game moves through three phases: setup -> playing -> game over.

* setup: players take turns placing their pieces anywhere on the board (4 each).
* playing: on your turn you select one of your pieces, move it 1 or 2 steps, then build a wall on one of the sides of the cell it
  ends on. Only then does the turn pass to the opponent.
* game over: as soon as a wall leaves every piece in a region of its own. Biggest total territory wins.

`GameState` is an immutable value. Every command produces a new state through `transition(state, command)`. A command that is not
allowed (wrong phase, occupied cell, blocked step, ...) returns the very same state object: the UI is expected to only offer legal
actions, so an illegal one is ignored rather than reported.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional, Self

from src.core.exceptions import GameStateError
from src.core.shared_types import Orientation, Outcome, Phase, Player
from src.wall_go.diagram import parse_diagram, to_diagram
from src.wall_go.moves import get_valid_moves
from src.wall_go.pieces import PIECES_PER_PLAYER, Piece, PlayerCounts, Wall, WallSlot
from src.wall_go.position import Position
from src.wall_go.territory import (
    all_isolated,
    calculate_scores,
    determine_winner,
    enclosed_regions,
)
from src.wall_go.walls import get_valid_wall_placements

MAX_MOVES_PER_TURN = 2


@dataclass(frozen=True)
class GameState:
    """
    Everything needed to continue a game. `GameState()` is the state of a brand new game.
    ---

    The turn-scoped fields (`selected_piece_id`, `moves_this_turn`, `has_moved`, `original_position`, `can_deselect`) describe the
    turn in progress and are reset when the turn's wall goes up.
    `next_id` is the counter used to give new pieces and walls a unique id.
    """

    phase: Phase = Phase.SETUP
    current_player: Player = Player.ONE
    pieces: tuple[Piece, ...] = ()
    walls: tuple[Wall, ...] = ()
    setup_pieces_placed: PlayerCounts = field(default_factory=PlayerCounts)
    selected_piece_id: Optional[str] = None
    moves_this_turn: int = 0
    has_moved: bool = False
    original_position: Optional[Position] = None
    can_deselect: bool = True
    winner: Optional[Outcome] = None
    scores: PlayerCounts = field(default_factory=PlayerCounts)
    next_id: int = 1

    @classmethod
    def from_diagram(cls, diagram: str, current_player: Player = Player.ONE) -> Self:
        """
        Start a game in the playing phase from a board diagram (see diagram.py), skipping setup.
        Handy to continue from a specific position. The setup counters reflect the pieces on the board.
        """
        pieces, walls = parse_diagram(diagram)
        placed = PlayerCounts()
        for piece in pieces:
            placed = placed.add(piece.player)
        return cls(
            phase=Phase.PLAYING,
            current_player=current_player,
            pieces=tuple(pieces),
            walls=tuple(walls),
            setup_pieces_placed=placed,
            next_id=len(pieces) + len(walls) + 1,
        )

    def to_diagram(self) -> str:
        return to_diagram(list(self.pieces), list(self.walls))

    @property
    def selected_piece(self) -> Optional[Piece]:
        if self.selected_piece_id is None:
            return None
        return self.piece(self.selected_piece_id)

    def piece(self, piece_id: str) -> Optional[Piece]:
        return next((piece for piece in self.pieces if piece.id == piece_id), None)

    def piece_at(self, position: Position) -> Optional[Piece]:
        return next((piece for piece in self.pieces if piece.position == position), None)


# --- COMMANDS ---
@dataclass(frozen=True)
class PlacePiece:
    position: Position


@dataclass(frozen=True)
class SelectPiece:
    piece_id: str


@dataclass(frozen=True)
class Deselect:
    pass


@dataclass(frozen=True)
class MovePiece:
    destination: Position


@dataclass(frozen=True)
class PlaceWall:
    position: Position
    orientation: Orientation


@dataclass(frozen=True)
class Restart:
    pass


Command = PlacePiece | SelectPiece | Deselect | MovePiece | PlaceWall | Restart


def transition(state: GameState, command: Command) -> GameState:
    """Apply a command. Returns `state` itself when the command is not allowed right now."""
    handler = COMMAND_HANDLERS.get(type(command))
    if handler is None:
        raise GameStateError(f"Unknown command: {command!r}")
    return handler(state, command)


# --- COMMAND HANDLERS ---
def place_piece(state: GameState, position: Position) -> GameState:
    """
    Setup: put a new piece for the current player on an empty cell.
    ---

    Players alternate after each placement. Once both players placed all their pieces the game moves on to the playing phase,
    which always starts with player 1 (regardless of who placed last).
    """
    if state.phase != Phase.SETUP:
        return state
    if not position.is_valid() or state.piece_at(position) is not None:
        return state

    player = state.current_player
    new_piece = Piece(
        id=f"piece-{player.value}-{state.next_id}", player=player, position=position
    )
    placed = state.setup_pieces_placed.add(player)
    setup_complete = placed.total == 2 * PIECES_PER_PLAYER

    return replace(
        state,
        pieces=(*state.pieces, new_piece),
        setup_pieces_placed=placed,
        current_player=Player.ONE if setup_complete else player.opponent,
        phase=Phase.PLAYING if setup_complete else Phase.SETUP,
        next_id=state.next_id + 1,
    )


def select_piece(state: GameState, piece_id: str) -> GameState:
    """
    Pick the piece to play this turn.
    ---

    * only your own pieces
    * you can switch to another piece freely, until the first move is made
    * selecting the piece that is already selected deselects it (again: only until the first move is made)
    """
    if state.phase != Phase.PLAYING:
        return state

    piece = state.piece(piece_id)
    if piece is None or piece.player != state.current_player:
        return state

    if piece_id == state.selected_piece_id:
        return deselect(state)

    if state.has_moved:
        return state

    return replace(
        state,
        selected_piece_id=piece.id,
        original_position=piece.position,
        can_deselect=True,
    )


def deselect(state: GameState) -> GameState:
    """Put the selected piece back down. Not possible anymore once it moved."""
    if state.phase != Phase.PLAYING or state.selected_piece_id is None:
        return state
    if not state.can_deselect:
        return state
    return replace(state, selected_piece_id=None, original_position=None)


def move_piece(state: GameState, destination: Position) -> GameState:
    """Step the selected piece to a neighbouring cell. At most two steps per turn, and the first one cannot be taken back."""
    if destination not in valid_moves(state):
        return state

    # valid_moves is only non-empty when a piece is selected
    selected = state.selected_piece
    assert selected is not None

    pieces = tuple(
        piece.moved_to(destination) if piece.id == selected.id else piece
        for piece in state.pieces
    )
    return replace(
        state,
        pieces=pieces,
        moves_this_turn=state.moves_this_turn + 1,
        has_moved=True,
        can_deselect=False,
    )


def place_wall(
    state: GameState, position: Position, orientation: Orientation
) -> GameState:
    """
    Build a wall next to the selected piece. This closes the turn.
    ---

    1. append the wall, credited to the current player and the selected piece
    2. check whether every piece is now isolated
    3. yes? compute scores and the winner, the game is over and the current player stays as is
    4. no? reset the turn and hand over to the opponent
    """
    if WallSlot(position, orientation) not in valid_wall_placements(state):
        return state

    selected = state.selected_piece
    assert selected is not None

    new_wall = Wall(
        id=f"wall-{state.next_id}",
        position=position,
        orientation=orientation,
        placed_by=state.current_player,
        piece_id=selected.id,
    )
    walls = (*state.walls, new_wall)
    after_wall = _end_turn(replace(state, walls=walls, next_id=state.next_id + 1))

    if all_isolated(state.pieces, walls):
        scores = calculate_scores(state.pieces, walls)
        return replace(
            after_wall,
            phase=Phase.GAME_OVER,
            scores=scores,
            winner=determine_winner(scores),
        )

    return replace(after_wall, current_player=state.current_player.opponent)


def restart(state: GameState) -> GameState:
    """Throw everything away. Allowed in any phase."""
    return GameState()


def _end_turn(state: GameState) -> GameState:
    """Clear the turn-scoped fields"""
    return replace(
        state,
        selected_piece_id=None,
        moves_this_turn=0,
        has_moved=False,
        original_position=None,
        can_deselect=True,
    )


COMMAND_HANDLERS: dict[type, Callable[[GameState, Any], GameState]] = {
    PlacePiece: lambda state, command: place_piece(state, command.position),
    SelectPiece: lambda state, command: select_piece(state, command.piece_id),
    Deselect: lambda state, command: deselect(state),
    MovePiece: lambda state, command: move_piece(state, command.destination),
    PlaceWall: lambda state, command: place_wall(
        state, command.position, command.orientation
    ),
    Restart: lambda state, command: restart(state),
}


# --- DERIVED QUERIES ---
def valid_moves(state: GameState) -> list[Position]:
    """Where the selected piece may step to. Empty outside the playing phase, without a selection, or after the second step."""
    selected = state.selected_piece
    if state.phase != Phase.PLAYING or selected is None:
        return []
    if state.moves_this_turn >= MAX_MOVES_PER_TURN:
        return []
    return get_valid_moves(selected, state.pieces, state.walls)


def valid_wall_placements(state: GameState) -> list[WallSlot]:
    """Where the selected piece may build. Empty until it has made at least one step this turn."""
    selected = state.selected_piece
    if state.phase != Phase.PLAYING or selected is None:
        return []
    if state.moves_this_turn == 0:
        return []
    return get_valid_wall_placements(selected, state.walls)


def enclosed_cells(state: GameState) -> dict[Position, Player]:
    """Cells to shade per player (see territory.enclosed_regions)."""
    return enclosed_regions(state.pieces, state.walls)


def is_game_over(state: GameState) -> bool:
    return state.phase == Phase.GAME_OVER


def winner(state: GameState) -> Optional[Outcome]:
    return state.winner


def remaining_setup_pieces(state: GameState, player: Player) -> int:
    return PIECES_PER_PLAYER - state.setup_pieces_placed.get(player)
