"""Runtime settings for the terminal game.

Environment-first, overridden by CLI flags:
OXO_DELAY, OXO_HUMAN_SYMBOL, OXO_OPPONENT_SYMBOL, OXO_OPPONENT_FIRST.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from .board import Cell

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    delay: float = 0.25  # seconds before the opponent replies (cosmetic)
    human_symbol: str = "X"
    opponent_symbol: str = "O"
    opponent_first: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        s = cls()
        raw = env.get("OXO_DELAY")
        if raw:
            try:
                s.delay = float(raw)
            except ValueError:
                raise ValueError(f"OXO_DELAY must be a number of seconds, got {raw!r}") from None
        s.human_symbol = env.get("OXO_HUMAN_SYMBOL") or s.human_symbol
        s.opponent_symbol = env.get("OXO_OPPONENT_SYMBOL") or s.opponent_symbol
        first = env.get("OXO_OPPONENT_FIRST")
        if first:
            s.opponent_first = first.strip().lower() in _TRUTHY
        s.validate()
        return s

    def validate(self) -> None:
        if self.delay < 0:
            raise ValueError(f"Delay must be >= 0, got {self.delay}")
        for name in ("human_symbol", "opponent_symbol"):
            sym = getattr(self, name)
            if len(sym) != 1 or sym.isdigit() or sym.isspace():
                raise ValueError(f"{name} must be a single non-digit character, got {sym!r}")
        if self.human_symbol == self.opponent_symbol:
            raise ValueError("Human and opponent symbols must differ")

    @property
    def symbols(self) -> Dict[Cell, str]:
        return {Cell.HUMAN: self.human_symbol, Cell.OPPONENT: self.opponent_symbol}
