from __future__ import annotations

import argparse
import csv
import logging
import sys
from typing import Optional

from .arena import exhaustive_outcomes, play_random_games
from .board import GameOutcome, deserialize_board, evaluate, is_valid_state, opponent_may_move
from .config import Settings
from .console import play, render_board
from .errors import GameError
from .search import find_best_move, score_moves


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="oxo", description="Tic-tac-toe against a perfect-play computer")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    p_play = sub.add_parser("play", help="Play an interactive game in the terminal")
    p_play.add_argument("--delay", type=float, default=None, help="Seconds before the computer replies")
    p_play.add_argument(
        "--opponent-first", action="store_true", default=None, help="Let the computer open the game"
    )
    p_play.add_argument("--human-symbol", default=None, help="Mark shown for the human (default: X)")
    p_play.add_argument("--opponent-symbol", default=None, help="Mark shown for the computer (default: O)")

    board_help = "Board string, 9 digits (0=empty,1=human,2=computer), e.g. 220110000"
    p_best = sub.add_parser(
        "best", help="Best computer move for a board, with per-move scores (the computer must be on move)"
    )
    p_best.add_argument("--board", help=board_help + " (omit with --stdin)")
    p_best.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_eval = sub.add_parser("evaluate", help="Outcome of a board")
    p_eval.add_argument("--board", required=True, help=board_help)

    p_arena = sub.add_parser("arena", help="Play the engine against human strategies")
    p_arena.add_argument("--games", type=int, default=100, help="Random games to play (default: 100)")
    p_arena.add_argument("--seed", type=int, default=42, help="Seed for the random human")
    p_arena.add_argument("--opponent-first", action="store_true", help="Let the computer open every game")
    p_arena.add_argument(
        "--exhaustive", action="store_true", help="Try every human move sequence instead of random games"
    )
    return p


def _parse_board(raw: Optional[str]):
    b = deserialize_board(raw or "")
    if not is_valid_state(b):
        raise ValueError("Board is not a valid reachable state.")
    return b


def _cmd_play(ns: argparse.Namespace) -> int:
    settings = Settings.from_env()
    if ns.delay is not None:
        settings.delay = ns.delay
    if ns.opponent_first is not None:
        settings.opponent_first = ns.opponent_first
    if ns.human_symbol is not None:
        settings.human_symbol = ns.human_symbol
    if ns.opponent_symbol is not None:
        settings.opponent_symbol = ns.opponent_symbol
    settings.validate()
    tally = play(settings)
    logging.info(
        "wins=%d losses=%d draws=%d",
        tally[GameOutcome.HUMAN_WINS],
        tally[GameOutcome.OPPONENT_WINS],
        tally[GameOutcome.DRAW],
    )
    return 0


def _cmd_best(ns: argparse.Namespace) -> int:
    if ns.stdin:
        w = csv.writer(sys.stdout)
        w.writerow(["board", "outcome", "best_move"])
        for line in sys.stdin:
            raw = line.strip()
            if not raw:
                continue
            try:
                b = _parse_board(raw)
            except ValueError:
                continue
            outcome = evaluate(b)
            on_move = outcome is GameOutcome.IN_PROGRESS and opponent_may_move(b)
            best = find_best_move(b) if on_move else ""
            w.writerow([raw, outcome.value, best])
        return 0
    b = _parse_board(ns.board)
    if not opponent_may_move(b):
        raise ValueError("The human is on move on this board; the computer cannot reply.")
    best = find_best_move(b)
    scores = score_moves(b)
    print(render_board(b))
    print(f"best={best} scores={scores}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("oxo"))
        except Exception:
            print("unknown")
        return 0

    try:
        if ns.cmd == "play":
            return _cmd_play(ns)

        if ns.cmd == "best":
            return _cmd_best(ns)

        if ns.cmd == "evaluate":
            b = _parse_board(ns.board)
            print(evaluate(b).value)
            return 0

        if ns.cmd == "arena":
            if ns.exhaustive:
                tally = exhaustive_outcomes(opponent_first=ns.opponent_first)
            else:
                if ns.games < 1:
                    logging.error("--games must be positive: %s", ns.games)
                    return 2
                tally = play_random_games(ns.games, seed=ns.seed, opponent_first=ns.opponent_first)
            for outcome in (GameOutcome.HUMAN_WINS, GameOutcome.OPPONENT_WINS, GameOutcome.DRAW):
                print(f"{outcome.value}={tally[outcome]}")
            return 1 if tally[GameOutcome.HUMAN_WINS] else 0
    except (GameError, ValueError) as e:
        logging.error("%s", e)
        return 2
    except (KeyboardInterrupt, EOFError):
        print()
        return 130

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
