import pytest

from oxo.board import Cell, GameOutcome, deserialize_board, new_board
from oxo.errors import InvalidMoveError, InvalidStateError
from oxo.session import GameSession


def test_new_session_waits_for_human():
    s = GameSession()
    assert s.board == new_board()
    assert s.outcome is GameOutcome.IN_PROGRESS
    assert s.turn is Cell.HUMAN
    assert s.accepts_human_input
    assert not s.is_over


def test_turns_alternate():
    s = GameSession()
    assert s.human_move(4) is GameOutcome.IN_PROGRESS
    assert s.turn is Cell.OPPONENT
    assert not s.accepts_human_input
    with pytest.raises(InvalidMoveError):
        s.human_move(0)
    mv = s.opponent_move()
    assert s.board[mv] is Cell.OPPONENT
    assert s.turn is Cell.HUMAN


def test_opponent_out_of_turn():
    with pytest.raises(InvalidStateError):
        GameSession().opponent_move()


def test_occupied_cell_refused_and_turn_kept():
    s = GameSession()
    s.human_move(0)
    s.opponent_move()
    taken = s.board.index(Cell.OPPONENT)
    before = list(s.board)
    with pytest.raises(InvalidMoveError):
        s.human_move(taken)
    assert s.board == before
    assert s.turn is Cell.HUMAN


def test_opponent_finishes_game():
    s = GameSession(board=deserialize_board("220110000"), turn=Cell.OPPONENT)
    assert s.opponent_move() == 2
    assert s.outcome is GameOutcome.OPPONENT_WINS
    assert s.is_over
    assert s.turn is Cell.OPPONENT
    with pytest.raises(InvalidMoveError):
        s.human_move(5)
    with pytest.raises(InvalidStateError):
        s.opponent_move()


def test_human_can_finish_game():
    s = GameSession(board=deserialize_board("110220000"))
    assert s.human_move(2) is GameOutcome.HUMAN_WINS
    assert not s.accepts_human_input


def test_opponent_first():
    s = GameSession(opponent_first=True)
    assert s.turn is Cell.OPPONENT
    assert not s.accepts_human_input


def test_reset():
    s = GameSession(board=deserialize_board("220110000"), turn=Cell.OPPONENT)
    s.opponent_move()
    s.reset()
    assert s.board == new_board()
    assert s.outcome is GameOutcome.IN_PROGRESS
    assert s.turn is Cell.HUMAN
    s.opponent_first = True
    s.reset()
    assert s.turn is Cell.OPPONENT


def test_copy_is_independent():
    s = GameSession()
    s.human_move(0)
    c = s.copy()
    c.opponent_move()
    assert s.board == deserialize_board("100000000")
    assert s.turn is Cell.OPPONENT
    assert c.turn is Cell.HUMAN


def test_custom_engine():
    s = GameSession()
    s.human_move(0)
    assert s.opponent_move(lambda board: 8) == 8
    assert s.board[8] is Cell.OPPONENT


def test_outcome_derived_from_given_board():
    s = GameSession(board=deserialize_board("111220200"))
    assert s.outcome is GameOutcome.HUMAN_WINS
    assert s.is_over
    assert not s.accepts_human_input
    with pytest.raises(InvalidMoveError):
        s.human_move(5)
    with pytest.raises(InvalidStateError):
        s.opponent_move()
    assert s.board == deserialize_board("111220200")


def test_turn_derived_from_mark_counts():
    assert GameSession(board=deserialize_board("100000000")).turn is Cell.OPPONENT
    assert GameSession(board=deserialize_board("200000000")).turn is Cell.HUMAN
    assert GameSession(board=deserialize_board("120000000")).turn is Cell.HUMAN
    s = GameSession(board=deserialize_board("120000000"), opponent_first=True)
    assert s.turn is Cell.OPPONENT
    assert GameSession(board=deserialize_board("220110000"), turn=Cell.OPPONENT).turn is Cell.OPPONENT
