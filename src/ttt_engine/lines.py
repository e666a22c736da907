"""
Win detection: scan the eight winning lines of a board.

Lines are enumerated rows first, then columns, then the 0-4-8 and 2-4-6
diagonals. find_winner reports the first completed line in that order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Union

from .board import BoardState, Cell, Player

WIN_PATTERNS = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
]

WINNING_TRIPLES = {
    "111": Player.PLAYER1,
    "222": Player.PLAYER2,
}

WINNER = "winner"
DRAW = "draw"
IN_PROGRESS = "in_progress"


def lines_of(board: BoardState) -> Iterator[str]:
    text = board.encoding()
    for a, b, c in WIN_PATTERNS:
        yield text[a] + text[b] + text[c]


def check_three_in_a_row(triple: Union[str, Sequence[Cell]]) -> Optional[Player]:
    if not isinstance(triple, str):
        triple = "".join(str(int(c)) for c in triple)
    return WINNING_TRIPLES.get(triple)


def find_winner(board: BoardState) -> Optional[Player]:
    for line in lines_of(board):
        w = check_three_in_a_row(line)
        if w is not None:
            return w
    return None


@dataclass(frozen=True)
class Outcome:
    kind: str
    winner: Optional[Player] = None

    @property
    def is_terminal(self) -> bool:
        return self.kind != IN_PROGRESS

    def __str__(self) -> str:
        if self.kind == WINNER:
            return f"winner:{int(self.winner)}"
        return self.kind


def classify(board: BoardState) -> Outcome:
    w = find_winner(board)
    if w is not None:
        return Outcome(WINNER, w)
    if board.is_full():
        return Outcome(DRAW)
    return Outcome(IN_PROGRESS)
