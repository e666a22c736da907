"""
Error kinds raised by the board and search layers.

OccupiedCellError is a refinement of InvalidInputError, so callers that only
handle bad input in general still see occupied-cell failures.
"""
from typing import Optional


class InvalidInputError(ValueError):
    MESSAGE = "Cannot process that input value"

    def __init__(self, msg: Optional[str] = None):
        super().__init__(msg or self.MESSAGE)


class OccupiedCellError(InvalidInputError):
    MESSAGE = "Sorry, the cell was already taken"

    def __init__(self, index: int, msg: Optional[str] = None):
        self.index = index
        super().__init__(msg or f"{self.MESSAGE} (cell {index})")


def is_invalid_input(exc: BaseException) -> bool:
    return isinstance(exc, InvalidInputError)
