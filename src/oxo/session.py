"""
Caller-owned game session: the board, the derived outcome, and whose turn it is.
"""
from dataclasses import dataclass, field
from typing import Callable, Optional

from .board import Board, Cell, GameOutcome, apply_move, evaluate, get_mark_counts, new_board
from .errors import InvalidMoveError, InvalidStateError
from .search import find_best_move


@dataclass
class GameSession:
    """
    One game between the human and the search engine.

    Human input is refused while the opponent is to move or after the game
    has ended; the opponent only moves on its own turn. The outcome is
    always derived from the board; when no turn is given it follows from
    the mark counts, with the opener on move when they are equal.
    """

    board: Board = field(default_factory=new_board)
    outcome: GameOutcome = GameOutcome.IN_PROGRESS
    turn: Optional[Cell] = None
    opponent_first: bool = False

    def __post_init__(self) -> None:
        self.outcome = evaluate(self.board)
        if self.turn is None:
            human, opponent = get_mark_counts(self.board)
            if human > opponent:
                self.turn = Cell.OPPONENT
            elif opponent > human:
                self.turn = Cell.HUMAN
            else:
                self.turn = Cell.OPPONENT if self.opponent_first else Cell.HUMAN

    @property
    def is_over(self) -> bool:
        return self.outcome is not GameOutcome.IN_PROGRESS

    @property
    def accepts_human_input(self) -> bool:
        return not self.is_over and self.turn is Cell.HUMAN

    def human_move(self, index: int) -> GameOutcome:
        if self.is_over:
            raise InvalidMoveError("Game is already over")
        if self.turn is not Cell.HUMAN:
            raise InvalidMoveError("It is not the human's turn")
        apply_move(self.board, index, Cell.HUMAN)
        return self._advance()

    def opponent_move(self, engine: Callable[[Board], int] = find_best_move) -> int:
        if self.is_over:
            raise InvalidStateError("Game is already over")
        if self.turn is not Cell.OPPONENT:
            raise InvalidStateError("It is not the opponent's turn")
        index = engine(self.board)
        apply_move(self.board, index, Cell.OPPONENT)
        self._advance()
        return index

    def _advance(self) -> GameOutcome:
        self.outcome = evaluate(self.board)
        if not self.is_over:
            self.turn = self.turn.other()
        return self.outcome

    def reset(self) -> None:
        self.board = new_board()
        self.outcome = GameOutcome.IN_PROGRESS
        self.turn = Cell.OPPONENT if self.opponent_first else Cell.HUMAN

    def copy(self) -> "GameSession":
        return GameSession(
            board=list(self.board),
            outcome=self.outcome,
            turn=self.turn,
            opponent_first=self.opponent_first,
        )
