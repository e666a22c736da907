"""
Line-based prompting for a human player.

Input and output are injectable so the prompt loop can be driven from tests
or from another front end.
"""
from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from .view import display_grid

PROMPT = "Please input your next move (1 - 9)"
RETRY = "Sorry, can you please input again?"


def _parse_move(raw: str) -> Optional[int]:
    try:
        value = int(raw.strip())
    except ValueError:
        return None
    return value if 1 <= value <= 9 else None


class CliUserInteraction:
    def __init__(
        self,
        presenter: Callable[[str], str] = display_grid,
        input_fn: Callable[[], str] = input,
        output: Optional[TextIO] = None,
    ):
        self.presenter = presenter
        self.input_fn = input_fn
        self.output = output

    def _print(self, msg: str) -> None:
        print(msg, file=self.output if self.output is not None else sys.stdout)

    def ask_for_player_move(self) -> int:
        """Return a move in 1..9, asking again until one is entered."""
        self._print(PROMPT)
        while True:
            value = _parse_move(self.input_fn())
            if value is not None:
                return value
            self._print(RETRY)

    def ask_for_cell(self) -> int:
        return self.ask_for_player_move() - 1

    def say(self, msg: str) -> None:
        self._print(msg)

    def print_board(self, encoding: str) -> None:
        self._print(self.presenter(encoding))
