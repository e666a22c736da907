"""Environment-driven settings.

Command-line flags take precedence; these are the defaults they fall back to.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .board import Player, as_player
from .errors import InvalidInputError

ENV_HUMAN_PLAYER = "TTT_HUMAN_PLAYER"
ENV_LOG_LEVEL = "TTT_LOG_LEVEL"
ENV_SEED = "TTT_SEED"


@dataclass(frozen=True)
class Settings:
    human_player: Player = Player.PLAYER1
    log_level: int = logging.INFO
    seed: int | None = None


def _parse_int(env: Mapping[str, str], name: str) -> int | None:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidInputError(f"{name} must be an integer, got {raw!r}") from None


def _parse_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise InvalidInputError(f"{ENV_LOG_LEVEL} is not a logging level: {raw!r}")
    return level


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if env is None else env
    human = _parse_int(env, ENV_HUMAN_PLAYER)
    level = env.get(ENV_LOG_LEVEL)
    if human is not None and human not in (1, 2):
        raise InvalidInputError(f"{ENV_HUMAN_PLAYER} must be 1 or 2, got {human}")
    return Settings(
        human_player=as_player(human) if human is not None else Player.PLAYER1,
        log_level=_parse_level(level) if level else logging.INFO,
        seed=_parse_int(env, ENV_SEED),
    )
