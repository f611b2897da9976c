"""Requests and Response models"""

from typing import Optional, Self

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Orientation, Outcome, Phase, Player
from src.wall_go.game import GameState
from src.wall_go.pieces import Piece, PlayerCounts, Wall, WallSlot
from src.wall_go.position import GRID_SIZE, Position

PieceId = str


def _validate_coordinate(value: int) -> int:
    if not 0 <= value < GRID_SIZE:
        raise InvalidRequestError(
            f"Coordinate {value} is not on the board. Use 0 - {GRID_SIZE - 1}."
        )
    return value


# --- REQUEST MODELS ---
class PlacePieceRequest(BaseModel):
    row: int
    col: int

    @field_validator("row", "col")
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        return _validate_coordinate(value)

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)


class SelectPieceRequest(BaseModel):
    piece_id: PieceId

    @field_validator("piece_id")
    @classmethod
    def validate_piece_id(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("A piece id cannot be empty.")
        return value


class MovePieceRequest(BaseModel):
    row: int
    col: int

    @field_validator("row", "col")
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        return _validate_coordinate(value)

    @property
    def destination(self) -> Position:
        return Position(self.row, self.col)


class PlaceWallRequest(BaseModel):
    """(row, col) is the wall slot, not the cell of the piece. See WallSlot for how slots map onto the grid lines."""

    row: int
    col: int
    orientation: Orientation

    @field_validator("row", "col")
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        return _validate_coordinate(value)

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)


# --- RESPONSE MODELS ---
class PositionResponse(BaseModel):
    row: int
    col: int

    @classmethod
    def from_position(cls, position: Position) -> Self:
        return cls(row=position.row, col=position.col)


class PieceResponse(BaseModel):
    id: PieceId
    player: Player
    row: int
    col: int

    @classmethod
    def from_piece(cls, piece: Piece) -> Self:
        return cls(
            id=piece.id,
            player=piece.player,
            row=piece.position.row,
            col=piece.position.col,
        )


class WallResponse(BaseModel):
    id: str
    row: int
    col: int
    orientation: Orientation
    placed_by: Player
    piece_id: Optional[PieceId]

    @classmethod
    def from_wall(cls, wall: Wall) -> Self:
        return cls(
            id=wall.id,
            row=wall.position.row,
            col=wall.position.col,
            orientation=wall.orientation,
            placed_by=wall.placed_by,
            piece_id=wall.piece_id,
        )


class PlayerCountsResponse(BaseModel):
    player1: int
    player2: int

    @classmethod
    def from_counts(cls, counts: PlayerCounts) -> Self:
        return cls(player1=counts.player1, player2=counts.player2)


class GameResponse(BaseModel):
    """Read-only snapshot of the game for the UI"""

    phase: Phase
    current_player: Player
    pieces: list[PieceResponse]
    walls: list[WallResponse]
    setup_pieces_placed: PlayerCountsResponse
    selected_piece_id: Optional[PieceId]
    moves_this_turn: int
    has_moved: bool
    original_position: Optional[PositionResponse]
    can_deselect: bool
    winner: Optional[Outcome]
    scores: PlayerCountsResponse
    region_sizes: dict[PieceId, int]

    @classmethod
    def from_state(cls, state: GameState, region_sizes: dict[PieceId, int]) -> Self:
        return cls(
            phase=state.phase,
            current_player=state.current_player,
            pieces=[PieceResponse.from_piece(piece) for piece in state.pieces],
            walls=[WallResponse.from_wall(wall) for wall in state.walls],
            setup_pieces_placed=PlayerCountsResponse.from_counts(state.setup_pieces_placed),
            selected_piece_id=state.selected_piece_id,
            moves_this_turn=state.moves_this_turn,
            has_moved=state.has_moved,
            original_position=(
                PositionResponse.from_position(state.original_position)
                if state.original_position
                else None
            ),
            can_deselect=state.can_deselect,
            winner=state.winner,
            scores=PlayerCountsResponse.from_counts(state.scores),
            region_sizes=region_sizes,
        )


class ValidMovesResponse(BaseModel):
    piece_id: Optional[PieceId]
    moves: list[PositionResponse]


class WallSlotResponse(BaseModel):
    row: int
    col: int
    orientation: Orientation

    @classmethod
    def from_slot(cls, slot: WallSlot) -> Self:
        return cls(
            row=slot.position.row, col=slot.position.col, orientation=slot.orientation
        )


class WallPlacementsResponse(BaseModel):
    piece_id: Optional[PieceId]
    placements: list[WallSlotResponse]


class EnclosedCellResponse(BaseModel):
    row: int
    col: int
    player: Player


class EnclosedRegionsResponse(BaseModel):
    cells: list[EnclosedCellResponse]
