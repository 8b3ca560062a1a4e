import io
import itertools
import os
import subprocess
import sys
from pathlib import Path

import pytest

from oxo.cli import main

SRC = Path(__file__).resolve().parents[1] / "src"


def _run_cli(args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    exe = [sys.executable, "-m", "oxo.cli"]
    env = dict(os.environ, PYTHONPATH=str(SRC))
    return subprocess.run(exe + args, cwd=cwd, capture_output=True, text=True, env=env)


def test_evaluate(capsys):
    assert main(["evaluate", "--board", "121212212"]) == 0
    assert capsys.readouterr().out.strip() == "draw"
    assert main(["evaluate", "--board", "000000000"]) == 0
    assert capsys.readouterr().out.strip() == "in_progress"


def test_best_prints_move_and_scores(capsys):
    assert main(["best", "--board", "220110000"]) == 0
    out = capsys.readouterr().out
    assert "best=2" in out
    assert "scores=[None, None, 10," in out


def test_best_on_finished_board_fails():
    assert main(["best", "--board", "222110100"]) == 2


def test_best_refuses_when_human_is_on_move():
    assert main(["best", "--board", "200000000"]) == 2
    assert main(["best", "--board", "212000000"]) == 2


@pytest.mark.parametrize("bad", ["abc", "012345678", "0123456789", "12345678x", "111222000"])
def test_invalid_boards(bad):
    assert main(["best", "--board", bad]) == 2
    assert main(["evaluate", "--board", bad]) == 2


def test_best_stdin_streams_csv(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("220110000\n\nnope\n121212212\n110020000\n200000000\n"))
    assert main(["best", "--stdin"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "board,outcome,best_move",
        "220110000,in_progress,2",
        "121212212,draw,",
        "110020000,in_progress,2",
        "200000000,in_progress,",
    ]


def test_arena_random(capsys):
    assert main(["arena", "--games", "5", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "human_wins=0" in out


def test_arena_rejects_zero_games():
    assert main(["arena", "--games", "0"]) == 2


def test_play_with_scripted_input(monkeypatch, capsys):
    cells = itertools.cycle(range(9))

    def fake_input(prompt):
        return "n" if prompt.startswith("Play again") else str(next(cells))

    monkeypatch.setattr("builtins.input", fake_input)
    monkeypatch.setenv("OXO_DELAY", "0")
    assert main(["play"]) == 0
    out = capsys.readouterr().out
    assert "You win!" not in out


def test_play_rejects_bad_symbols():
    assert main(["play", "--human-symbol", "O"]) == 2


def test_play_interrupted(monkeypatch):
    def boom(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", boom)
    assert main(["play", "--delay", "0"]) == 130


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out


def test_cli_subprocess(tmp_path: Path):
    r = _run_cli(["evaluate", "--board", "222110100"], cwd=tmp_path)
    assert r.returncode == 0
    assert r.stdout.strip() == "opponent_wins"
    r = _run_cli(["best", "--board", "12345678x"], cwd=tmp_path)
    assert r.returncode != 0
    assert "Invalid board string" in r.stderr
