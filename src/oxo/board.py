"""
Board state: representation, serialization, rules, winner/draw checks.
Notes:
- State is a list of 9 cells in row-major order: 0=empty, 1=human, 2=opponent.
- A "ply" is one move by either side.
- Outcomes are derived from the board on demand, never stored in it.
"""
from enum import Enum
from typing import List, Optional, Tuple

from .errors import InvalidMoveError

CELL_COUNT = 9

WIN_PATTERNS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


class Cell(Enum):
    EMPTY = 0
    HUMAN = 1
    OPPONENT = 2

    def other(self) -> "Cell":
        """Return the opposing mark."""
        if self is Cell.HUMAN:
            return Cell.OPPONENT
        if self is Cell.OPPONENT:
            return Cell.HUMAN
        raise ValueError("EMPTY has no opposing mark")


class GameOutcome(Enum):
    IN_PROGRESS = "in_progress"
    HUMAN_WINS = "human_wins"
    OPPONENT_WINS = "opponent_wins"
    DRAW = "draw"


Board = List[Cell]


def new_board() -> Board:
    return [Cell.EMPTY] * CELL_COUNT


def serialize_board(board: Board) -> str:
    return ''.join(str(cell.value) for cell in board)


def deserialize_board(board_str: str) -> Board:
    raw = board_str.strip()
    if len(raw) != CELL_COUNT or any(c not in "012" for c in raw):
        raise ValueError(f"Invalid board string {board_str!r}. Must be 9 chars of 0/1/2.")
    return [Cell(int(c)) for c in raw]


def is_winner(board: Board, mark: Cell) -> bool:
    return any(
        board[a] is mark and board[b] is mark and board[c] is mark
        for a, b, c in WIN_PATTERNS
    )


def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """First completed win pattern, or None."""
    for a, b, c in WIN_PATTERNS:
        v = board[a]
        if v is not Cell.EMPTY and v is board[b] and v is board[c]:
            return (a, b, c)
    return None


def is_draw(board: Board) -> bool:
    return (
        Cell.EMPTY not in board
        and not is_winner(board, Cell.HUMAN)
        and not is_winner(board, Cell.OPPONENT)
    )


def is_terminal(board: Board) -> bool:
    return (
        is_winner(board, Cell.HUMAN)
        or is_winner(board, Cell.OPPONENT)
        or is_draw(board)
        or Cell.EMPTY not in board
    )


def legal_moves(board: Board) -> List[int]:
    """Empty cell indices in ascending order; move selection ties go to the lowest."""
    return [i for i, v in enumerate(board) if v is Cell.EMPTY]


def apply_move(board: Board, index: int, mark: Cell) -> None:
    """Place ``mark`` at ``index``. The board is left untouched on error."""
    if mark is Cell.EMPTY:
        raise InvalidMoveError("Cannot place an EMPTY mark")
    if not isinstance(index, int) or not 0 <= index < CELL_COUNT:
        raise InvalidMoveError(f"Cell {index!r} is out of range. Must be 0-8.")
    if board[index] is not Cell.EMPTY:
        raise InvalidMoveError(f"Cell {index} is already occupied by {board[index].name}")
    board[index] = mark


def evaluate(board: Board) -> GameOutcome:
    if is_winner(board, Cell.HUMAN):
        return GameOutcome.HUMAN_WINS
    if is_winner(board, Cell.OPPONENT):
        return GameOutcome.OPPONENT_WINS
    if is_draw(board):
        return GameOutcome.DRAW
    return GameOutcome.IN_PROGRESS


def get_mark_counts(board: Board) -> Tuple[int, int]:
    return board.count(Cell.HUMAN), board.count(Cell.OPPONENT)


def is_valid_state(board: Board) -> bool:
    """Well-formed 9-cell board that alternating play could produce.

    Either side may have opened, so mark counts may differ by one in
    either direction. Both sides holding a line is never reachable, and
    the winner made the last move so it cannot trail the loser in marks.
    """
    if len(board) != CELL_COUNT or any(not isinstance(v, Cell) for v in board):
        return False
    human, opponent = get_mark_counts(board)
    if abs(human - opponent) > 1:
        return False
    if is_winner(board, Cell.HUMAN) and is_winner(board, Cell.OPPONENT):
        return False
    if is_winner(board, Cell.HUMAN) and human < opponent:
        return False
    if is_winner(board, Cell.OPPONENT) and opponent < human:
        return False
    return True


def opponent_may_move(board: Board) -> bool:
    """The computer can be on move: it does not lead the human in marks."""
    human, opponent = get_mark_counts(board)
    return opponent <= human
