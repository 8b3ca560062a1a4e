"""
Terminal front end: draws the grid, reads cell numbers, and runs games
against the search engine until the player stops.
"""
from __future__ import annotations

import time
from collections import Counter
from typing import Callable, Mapping, Optional, Sequence

from .board import Board, Cell, GameOutcome, winning_line
from .config import Settings
from .errors import InvalidMoveError
from .session import GameSession

DEFAULT_SYMBOLS = {Cell.HUMAN: "X", Cell.OPPONENT: "O"}

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def render_board(
    board: Board,
    symbols: Optional[Mapping[Cell, str]] = None,
    highlight: Optional[Sequence[int]] = None,
) -> str:
    """Draw the 3x3 grid. Empty cells show their index; highlighted cells are bracketed."""
    symbols = symbols or DEFAULT_SYMBOLS
    marked = set(highlight or ())
    lines = []
    for row in range(3):
        cells = []
        for col in range(3):
            i = row * 3 + col
            v = board[i]
            txt = str(i) if v is Cell.EMPTY else symbols[v]
            cells.append(f"[{txt}]" if i in marked else f" {txt} ")
        lines.append("|".join(cells))
    return "\n---+---+---\n".join(lines)


def status_line(session: GameSession, symbols: Optional[Mapping[Cell, str]] = None) -> str:
    symbols = symbols or DEFAULT_SYMBOLS
    if session.outcome is GameOutcome.HUMAN_WINS:
        return "You win!"
    if session.outcome is GameOutcome.OPPONENT_WINS:
        return "Computer wins."
    if session.outcome is GameOutcome.DRAW:
        return "It's a draw!"
    if session.turn is Cell.HUMAN:
        return f"Your turn ({symbols[Cell.HUMAN]})"
    return "Computer is thinking..."


def run_game(
    session: GameSession,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
    delay: float = 0.0,
    sleep: Callable[[float], None] = time.sleep,
    symbols: Optional[Mapping[Cell, str]] = None,
) -> GameOutcome:
    read = read or input
    write = write or print
    write(render_board(session.board, symbols))
    while not session.is_over:
        write(status_line(session, symbols))
        if session.accepts_human_input:
            raw = read("Cell (0-8): ").strip()
            try:
                index = int(raw)
            except ValueError:
                write(f"Not a cell number: {raw!r}")
                continue
            try:
                session.human_move(index)
            except InvalidMoveError as e:
                write(str(e))
                continue
        else:
            if delay > 0:
                sleep(delay)
            index = session.opponent_move()
            write(f"Computer plays {index}")
        write(render_board(session.board, symbols, winning_line(session.board)))
    write(status_line(session, symbols))
    return session.outcome


def play(
    settings: Settings,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Counter:
    """Play games until the player declines a rematch; returns the outcome tally."""
    read = read or input
    session = GameSession(opponent_first=settings.opponent_first)
    tally: Counter = Counter()
    while True:
        outcome = run_game(session, read, write, settings.delay, sleep, settings.symbols)
        tally[outcome] += 1
        if read("Play again? [y/N] ").strip().lower() not in ("y", "yes"):
            break
        session.reset()
    return tally
