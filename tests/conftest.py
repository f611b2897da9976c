"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

import pytest

from src.wall_go.game import GameState, PlacePiece, transition
from tests.wall_go.boards import SETUP_PLACEMENTS


@pytest.fixture
def initial_state() -> GameState:
    return GameState()


@pytest.fixture
def playing_state() -> GameState:
    """
    Game right after setup. Pieces (ids follow the placement order):
    * player 1: piece-1-1 (0,0), piece-1-3 (0,2), piece-1-5 (0,4), piece-1-7 (0,6)
    * player 2: piece-2-2 (6,0), piece-2-4 (6,2), piece-2-6 (6,4), piece-2-8 (6,6)
    """
    state = GameState()
    for position in SETUP_PLACEMENTS:
        state = transition(state, PlacePiece(position))
    return state
