"""Plain-text rendering of a board encoding."""
from typing import List

from .board import BoardState
from .errors import InvalidInputError

SYMBOLS = str.maketrans("012", ".XO")


def horizontal_line() -> str:
    return " -------"


def display_row(row: str) -> str:
    if len(row) != 3 or any(ch not in "012" for ch in row):
        raise InvalidInputError(f"Invalid row: {row!r}")
    a, b, c = row.translate(SYMBOLS)
    return f"| {a} {b} {c} |"


def display_grid(encoding: str) -> str:
    text = BoardState.from_encoding(encoding).encoding()
    lines: List[str] = [horizontal_line()]
    for i in (0, 3, 6):
        lines.append(display_row(text[i:i + 3]))
    lines.append(horizontal_line())
    return "\n".join(lines)
