"""
Exceptions shared across layers.

NOTE: the rules themselves never raise. An illegal command is simply ignored by the state machine.
These are reserved for malformed input at the boundary (requests, diagrams) and programming errors.
"""


class GameError(Exception):
    """Base class for everything the Wall Go backend raises on purpose."""


class GameStateError(GameError):
    """A game state could not be constructed (ex. an unreadable board diagram)."""


class InvalidRequestError(GameError):
    """A request cannot even be interpreted (ex. coordinates that are not on the board)."""
