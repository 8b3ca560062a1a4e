"""
Exact minimax search over the full game tree, from the opponent's perspective.
Scoring policy:
- Opponent win scores WIN_SCORE - depth: faster wins score higher.
- Human win scores depth - WIN_SCORE: unavoidable losses are delayed.
- Draw scores 0.
The board is mutated in place and restored after every branch.
"""
import logging
import math
from typing import List, Optional

from .board import CELL_COUNT, Board, Cell, is_draw, is_terminal, is_winner, legal_moves, serialize_board
from .errors import InvalidStateError

# Must exceed the longest possible game in plies, so it scales with the board.
WIN_SCORE = CELL_COUNT + 1


def minimax(board: Board, depth: int, maximizing: bool) -> int:
    if is_winner(board, Cell.OPPONENT):
        return WIN_SCORE - depth
    if is_winner(board, Cell.HUMAN):
        return depth - WIN_SCORE
    if is_draw(board):
        return 0

    mark = Cell.OPPONENT if maximizing else Cell.HUMAN
    best = -math.inf if maximizing else math.inf
    for mv in legal_moves(board):
        board[mv] = mark
        try:
            score = minimax(board, depth + 1, not maximizing)
        finally:
            board[mv] = Cell.EMPTY
        best = max(best, score) if maximizing else min(best, score)
    return int(best)


def score_moves(board: Board) -> List[Optional[int]]:
    """Score of every opponent move; None on occupied cells.

    The move itself is depth 0, so a move that wins on the spot scores WIN_SCORE.
    """
    scores: List[Optional[int]] = [None] * CELL_COUNT
    for mv in legal_moves(board):
        board[mv] = Cell.OPPONENT
        try:
            scores[mv] = minimax(board, 0, False)
        finally:
            board[mv] = Cell.EMPTY
    return scores


def find_best_move(board: Board) -> int:
    """Index of the optimal opponent move; the lowest index wins ties.

    Raises InvalidStateError when the game is already decided or the board is full.
    """
    if is_terminal(board):
        raise InvalidStateError(f"No move to search on terminal board {serialize_board(board)}")

    best_score = -math.inf
    best_move: Optional[int] = None
    scores = score_moves(board)
    for mv, score in enumerate(scores):
        if score is not None and score > best_score:
            best_score = score
            best_move = mv
    if best_move is None:
        raise InvalidStateError(f"No legal move on board {serialize_board(board)}")
    logging.debug("best_move=%d score=%s scores=%s", best_move, best_score, scores)
    return best_move
