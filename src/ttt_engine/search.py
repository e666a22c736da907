"""
Exact negamax search over Tic-Tac-Toe positions.

Scores are from the perspective of the player about to move: +1 win, 0 draw,
-1 loss. A child position is scored for the opponent and negated by the caller.
The search is exhaustive: no pruning and no memoization, so identical
sub-positions are re-evaluated each time they are reached.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .board import BoardState, PlayerLike, as_player, opponent_of
from .lines import find_winner

logger = logging.getLogger(__name__)

BEST_SCORE = 1

MoveCallback = Callable[[int, int], Optional[bool]]


def evaluate_score(board: BoardState, player: PlayerLike) -> int:
    p = as_player(player)
    opp = opponent_of(p)
    w = find_winner(board)
    if w == p:
        return 1
    if w == opp:
        return -1
    if board.is_full():
        return 0
    return max(
        -evaluate_score(board.apply_move(p, idx), opp)
        for idx in board.empty_cells()
    )


def analyse_each_move(
    board: BoardState,
    player: PlayerLike,
    callback: Optional[MoveCallback] = None,
) -> Dict[int, int]:
    """Score every empty cell for `player`, in ascending index order.

    `callback(cell_index, score)` is called as each move is scored; returning
    True stops the scan, and the partial mapping is returned.
    """
    p = as_player(player)
    opp = opponent_of(p)
    scores: Dict[int, int] = {}
    for idx in board.empty_cells():
        score = -evaluate_score(board.apply_move(p, idx), opp)
        scores[idx] = score
        logger.debug("board=%s player=%d move=%d score=%d", board, p, idx, score)
        if callback is not None and callback(idx, score):
            break
    return scores


def suggest_next_move(board: BoardState, player: PlayerLike) -> Optional[int]:
    p = as_player(player)
    moves = board.empty_cells()
    if not moves:
        return None
    if len(moves) == 1:
        return moves[0]

    best_move: Optional[int] = None
    best_score: Optional[int] = None

    def track(idx: int, score: int) -> bool:
        nonlocal best_move, best_score
        if best_score is None or score > best_score:
            best_move, best_score = idx, score
        return score == BEST_SCORE

    analyse_each_move(board, p, track)
    return best_move
