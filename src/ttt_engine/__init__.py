"""ttt_engine package.

Board model, win detection, an exact negamax search, and a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .board import BoardState, Cell, Player, opponent_of
from .errors import InvalidInputError, OccupiedCellError
from .lines import classify, find_winner
from .search import evaluate_score, suggest_next_move

__all__ = [
    "BoardState",
    "Cell",
    "Player",
    "opponent_of",
    "InvalidInputError",
    "OccupiedCellError",
    "classify",
    "find_winner",
    "evaluate_score",
    "suggest_next_move",
]
