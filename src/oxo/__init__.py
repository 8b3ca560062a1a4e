"""oxo package.

Tic-tac-toe against a computer opponent that plays perfectly via exhaustive
minimax search, plus a terminal front end and an arena for checking that the
engine never loses.

Convenience imports are exposed for common workflows.
"""

from .board import (
    WIN_PATTERNS,
    Cell,
    GameOutcome,
    apply_move,
    evaluate,
    is_draw,
    is_terminal,
    is_winner,
    legal_moves,
    new_board,
)
from .errors import GameError, InvalidMoveError, InvalidStateError
from .search import find_best_move, minimax, score_moves
from .session import GameSession

__all__ = [
    "WIN_PATTERNS",
    "Cell",
    "GameOutcome",
    "apply_move",
    "evaluate",
    "is_draw",
    "is_terminal",
    "is_winner",
    "legal_moves",
    "new_board",
    "GameError",
    "InvalidMoveError",
    "InvalidStateError",
    "find_best_move",
    "minimax",
    "score_moves",
    "GameSession",
]
