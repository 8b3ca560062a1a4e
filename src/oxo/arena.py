"""
Arena: play the search engine against human strategies.

Used to check the no-loss guarantee, either against every possible human
move sequence or against seeded random humans.
"""
from __future__ import annotations

import logging
from collections import Counter
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from .board import Board, Cell, GameOutcome, legal_moves, serialize_board
from .search import find_best_move
from .session import GameSession

HumanPolicy = Callable[[Board], int]
Engine = Callable[[Board], int]


def random_human(rng: np.random.Generator) -> HumanPolicy:
    def policy(board: Board) -> int:
        return int(rng.choice(legal_moves(board)))
    return policy


def memoized_engine() -> Engine:
    """find_best_move with replies remembered per board for one run."""
    cache: Dict[str, int] = {}

    def engine(board: Board) -> int:
        key = serialize_board(board)
        if key not in cache:
            cache[key] = find_best_move(board)
        return cache[key]
    return engine


def play_game(
    human_policy: HumanPolicy,
    opponent_first: bool = False,
    engine: Optional[Engine] = None,
) -> Tuple[GameOutcome, List[int]]:
    engine = engine or find_best_move
    session = GameSession(opponent_first=opponent_first)
    moves: List[int] = []
    while not session.is_over:
        if session.turn is Cell.HUMAN:
            mv = human_policy(list(session.board))
            session.human_move(mv)
        else:
            mv = session.opponent_move(engine)
        moves.append(mv)
    return session.outcome, moves


def play_random_games(games: int = 100, seed: int = 42, opponent_first: bool = False) -> Counter:
    rng = np.random.default_rng(seed)
    human = random_human(rng)
    engine = memoized_engine()
    tally: Counter = Counter()
    for _ in range(games):
        outcome, moves = play_game(human, opponent_first=opponent_first, engine=engine)
        tally[outcome] += 1
        if outcome is GameOutcome.HUMAN_WINS:
            logging.warning("Engine lost: moves=%s", moves)
    logging.info("random arena games=%d seed=%d tally=%s", games, seed, _fmt(tally))
    return tally


def _explore(session: GameSession, engine: Engine, tally: Counter) -> None:
    if session.is_over:
        tally[session.outcome] += 1
        return
    if session.turn is Cell.OPPONENT:
        session.opponent_move(engine)
        _explore(session, engine, tally)
        return
    for mv in legal_moves(session.board):
        branch = session.copy()
        branch.human_move(mv)
        _explore(branch, engine, tally)


def exhaustive_outcomes(opponent_first: bool = False) -> Counter:
    """Outcome of every game the engine can be led into, one count per human move sequence."""
    tally: Counter = Counter()
    _explore(GameSession(opponent_first=opponent_first), memoized_engine(), tally)
    logging.info("exhaustive arena opponent_first=%s tally=%s", opponent_first, _fmt(tally))
    return tally


def _fmt(tally: Counter) -> str:
    return ' '.join(f"{o.value}={tally.get(o, 0)}" for o in GameOutcome if o is not GameOutcome.IN_PROGRESS)
