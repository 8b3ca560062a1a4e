"""
Error kinds raised by the game core.
Both are local conditions: the caller decides whether to ignore the input
or treat it as a logic fault.
"""


class GameError(Exception):
    """Base class for game errors."""


class InvalidMoveError(GameError, ValueError):
    """Placement on an occupied or out-of-range cell, or input out of turn."""


class InvalidStateError(GameError, ValueError):
    """Best move requested on a board with no legal move left."""
