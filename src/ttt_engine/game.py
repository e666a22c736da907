"""
Game drivers: a human-vs-engine loop and an engine-vs-random match runner.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .board import BoardState, Player, PlayerLike, as_player, opponent_of
from .errors import OccupiedCellError
from .interaction import CliUserInteraction
from .lines import DRAW, Outcome, classify
from .search import suggest_next_move

logger = logging.getLogger(__name__)


def _announce(outcome: Outcome, human: Player) -> str:
    if outcome.kind == DRAW:
        return "Draw!"
    who = "You win!" if outcome.winner == human else "Engine wins!"
    return f"{who} (player {int(outcome.winner)})"


def play_game(
    interaction: CliUserInteraction,
    human: PlayerLike = Player.PLAYER1,
    start: Optional[BoardState] = None,
) -> Outcome:
    """Play one game against the engine and return its outcome.

    Player one always opens; when `start` is given the side to move is
    inferred from its piece counts.
    """
    human = as_player(human)
    board = start if start is not None else BoardState()
    player = board.current_player()
    interaction.print_board(board.encoding())
    outcome = classify(board)
    while not outcome.is_terminal:
        if player == human:
            cell = interaction.ask_for_cell()
            try:
                board = board.apply_move(player, cell)
            except OccupiedCellError as exc:
                interaction.say(str(exc))
                continue
        else:
            move = suggest_next_move(board, player)
            interaction.say(f"Engine plays: {move + 1}")
            board = board.apply_move(player, move)
        logger.debug("board=%s after player %d", board, player)
        interaction.print_board(board.encoding())
        player = opponent_of(player)
        outcome = classify(board)
    interaction.say(_announce(outcome, human))
    return outcome


@dataclass
class MatchResult:
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.losses + self.draws


def play_match(games: int, seed: Optional[int] = None, engine: PlayerLike = Player.PLAYER1) -> MatchResult:
    """Pit the engine against an opponent that picks uniformly among empty cells."""
    engine = as_player(engine)
    rng = np.random.default_rng(seed)
    result = MatchResult()
    for g in range(games):
        board = BoardState()
        player = Player.PLAYER1
        outcome = classify(board)
        while not outcome.is_terminal:
            if player == engine:
                mv = suggest_next_move(board, player)
            else:
                mv = int(rng.choice(board.empty_cells()))
            board = board.apply_move(player, mv)
            player = opponent_of(player)
            outcome = classify(board)
        if outcome.kind == DRAW:
            result.draws += 1
        elif outcome.winner == engine:
            result.wins += 1
        else:
            result.losses += 1
        logger.debug("game=%d final=%s outcome=%s", g, board, outcome)
    return result
