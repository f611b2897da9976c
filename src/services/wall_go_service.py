"""Orchestration of communication from the UI to the rules engine (and the reverse direction)."""

import logging
from typing import Callable, Optional

from src.api.models import (
    EnclosedCellResponse,
    EnclosedRegionsResponse,
    GameResponse,
    MovePieceRequest,
    PlacePieceRequest,
    PlaceWallRequest,
    PositionResponse,
    SelectPieceRequest,
    ValidMovesResponse,
    WallPlacementsResponse,
    WallSlotResponse,
)
from src.core.shared_types import Outcome, Phase
from src.wall_go.game import (
    Command,
    Deselect,
    GameState,
    MovePiece,
    PlacePiece,
    PlaceWall,
    Restart,
    SelectPiece,
    enclosed_cells,
    is_game_over,
    transition,
    valid_moves,
    valid_wall_placements,
    winner,
)
from src.wall_go.territory import region_sizes

logger = logging.getLogger(__name__)

StateListener = Callable[[GameState], None]


class WallGoService:
    """
    Command/query surface of a single local Wall Go game.
    ----

    Holds the latest committed GameState and swaps it for a new one on every accepted command.
    Commands are serialized (one UI event at a time), so there is no locking.
    """

    def __init__(self, state: Optional[GameState] = None) -> None:
        self.state = state if state is not None else GameState()
        self._listeners: list[StateListener] = []

    # -- Commands ---
    def place_piece(self, request: PlacePieceRequest) -> GameResponse:
        return self._apply(PlacePiece(request.position))

    def select_piece(self, request: SelectPieceRequest) -> GameResponse:
        return self._apply(SelectPiece(request.piece_id))

    def deselect(self) -> GameResponse:
        return self._apply(Deselect())

    def move_piece(self, request: MovePieceRequest) -> GameResponse:
        return self._apply(MovePiece(request.destination))

    def place_wall(self, request: PlaceWallRequest) -> GameResponse:
        return self._apply(PlaceWall(request.position, request.orientation))

    def restart(self) -> GameResponse:
        logger.info("Restarting game (was in phase %r)", str(self.state.phase))
        return self._apply(Restart())

    # -- Queries ---
    def current_state(self) -> GameResponse:
        return self._create_game_response(self.state)

    def valid_moves(self) -> ValidMovesResponse:
        """Destinations for the selected piece (empty when nothing can move right now)."""
        return ValidMovesResponse(
            piece_id=self.state.selected_piece_id,
            moves=[
                PositionResponse.from_position(position)
                for position in valid_moves(self.state)
            ],
        )

    def valid_wall_placements(self) -> WallPlacementsResponse:
        return WallPlacementsResponse(
            piece_id=self.state.selected_piece_id,
            placements=[
                WallSlotResponse.from_slot(slot)
                for slot in valid_wall_placements(self.state)
            ],
        )

    def enclosed_regions(self) -> EnclosedRegionsResponse:
        """Cells to shade, in reading order."""
        cells = enclosed_cells(self.state)
        return EnclosedRegionsResponse(
            cells=[
                EnclosedCellResponse(row=position.row, col=position.col, player=player)
                for position, player in sorted(
                    cells.items(), key=lambda item: (item[0].row, item[0].col)
                )
            ]
        )

    def is_game_over(self) -> bool:
        return is_game_over(self.state)

    def winner(self) -> Optional[Outcome]:
        return winner(self.state)

    def diagram(self) -> str:
        return self.state.to_diagram()

    # -- Subscriptions ---
    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call `listener` with every newly committed state. Returns a function that removes the subscription again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- Internal helpers --
    def _apply(self, command: Command) -> GameResponse:
        """Run the command through the state machine and publish the result if anything changed."""
        previous = self.state
        new_state = transition(previous, command)

        if new_state is previous:
            logger.debug("Ignored %r in phase %r", command, str(previous.phase))
            return self._create_game_response(previous)

        self.state = new_state
        self._log_phase_change(previous, new_state)
        for listener in list(self._listeners):
            # Let exceptions propagate; the UI decides how to handle them
            listener(new_state)
        return self._create_game_response(new_state)

    def _log_phase_change(self, previous: GameState, new_state: GameState) -> None:
        if previous.phase == new_state.phase:
            return
        if new_state.phase == Phase.PLAYING:
            logger.info("Setup complete, player %d to move", new_state.current_player)
        elif new_state.phase == Phase.GAME_OVER:
            logger.info(
                "Game over. scores: %d - %d, winner: %s",
                new_state.scores.player1,
                new_state.scores.player2,
                new_state.winner,
            )
            logger.debug("Final board:\n%s", new_state.to_diagram())

    def _create_game_response(self, state: GameState) -> GameResponse:
        return GameResponse.from_state(state, region_sizes(state.pieces, state.walls))
