"""
Board representation for Tic-Tac-Toe.

Notes:
- A board is 9 cells in row-major order: index // 3 is the row, index % 3 the column.
- Cells hold 0=empty, 1=player one (X), 2=player two (O). The 9-character string of
  those digits is the board's encoding and its only external form.
- BoardState is a value: moves return a new board and never touch the receiver.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Tuple, Union

from .errors import InvalidInputError, OccupiedCellError

BOARD_CELLS = 9
ENCODING_ALPHABET = "012"


class Cell(IntEnum):
    EMPTY = 0
    PLAYER1 = 1
    PLAYER2 = 2


class Player(IntEnum):
    PLAYER1 = 1
    PLAYER2 = 2

    @property
    def mark(self) -> Cell:
        return Cell(self.value)


PlayerLike = Union[Player, int]


def as_player(player: PlayerLike) -> Player:
    """Coerce 1/2 (or a Player) to a Player, rejecting everything else."""
    if isinstance(player, bool) or not isinstance(player, int):
        raise InvalidInputError(f"Invalid player: {player!r}")
    try:
        return Player(player)
    except ValueError:
        raise InvalidInputError(f"Invalid player: {player!r}") from None


def opponent_of(player: PlayerLike) -> Player:
    p = as_player(player)
    return Player.PLAYER2 if p == Player.PLAYER1 else Player.PLAYER1


def _check_index(value: object, upper: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < upper:
        raise InvalidInputError(f"{what} out of range: {value!r}")
    return value


@dataclass(frozen=True)
class BoardState:
    cells: Tuple[Cell, ...] = field(default_factory=lambda: (Cell.EMPTY,) * BOARD_CELLS)

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if len(cells) != BOARD_CELLS:
            raise InvalidInputError(f"Board must have {BOARD_CELLS} cells, got {len(cells)}")
        try:
            cells = tuple(Cell(c) for c in cells)
        except ValueError:
            raise InvalidInputError(f"Invalid cell value in {self.cells!r}") from None
        object.__setattr__(self, "cells", cells)

    @classmethod
    def from_encoding(cls, text: str) -> "BoardState":
        if not isinstance(text, str) or len(text) != BOARD_CELLS:
            raise InvalidInputError(f"Invalid board encoding: {text!r}")
        if any(ch not in ENCODING_ALPHABET for ch in text):
            raise InvalidInputError(f"Invalid board encoding: {text!r}")
        return cls(tuple(Cell(int(ch)) for ch in text))

    def encoding(self) -> str:
        return "".join(str(c.value) for c in self.cells)

    def __str__(self) -> str:
        return self.encoding()

    def cell(self, index: int) -> Cell:
        return self.cells[_check_index(index, BOARD_CELLS, "Cell index")]

    def row(self, n: int) -> Tuple[Cell, ...]:
        n = _check_index(n, 3, "Row index")
        return self.cells[n * 3:n * 3 + 3]

    def column(self, n: int) -> Tuple[Cell, ...]:
        n = _check_index(n, 3, "Column index")
        return self.cells[n::3]

    def diagonal(self, n: int) -> Tuple[Cell, ...]:
        """Diagonal 0 runs top-left to bottom-right, diagonal 1 top-right to bottom-left."""
        n = _check_index(n, 2, "Diagonal index")
        idx = (0, 4, 8) if n == 0 else (2, 4, 6)
        return tuple(self.cells[i] for i in idx)

    def is_empty(self) -> bool:
        return all(c == Cell.EMPTY for c in self.cells)

    def is_full(self) -> bool:
        return Cell.EMPTY not in self.cells

    def empty_cells(self) -> List[int]:
        return [i for i, c in enumerate(self.cells) if c == Cell.EMPTY]

    def piece_counts(self) -> Tuple[int, int]:
        return self.cells.count(Cell.PLAYER1), self.cells.count(Cell.PLAYER2)

    def current_player(self) -> Player:
        """Side to move assuming player one opened."""
        p1, p2 = self.piece_counts()
        return Player.PLAYER1 if p1 == p2 else Player.PLAYER2

    def apply_move(self, player: PlayerLike, cell_index: int) -> "BoardState":
        p = as_player(player)
        idx = _check_index(cell_index, BOARD_CELLS, "Cell index")
        if self.cells[idx] != Cell.EMPTY:
            raise OccupiedCellError(idx)
        lst = list(self.cells)
        lst[idx] = p.mark
        return BoardState(tuple(lst))

    def copy(self) -> "BoardState":
        return dataclasses.replace(self)
