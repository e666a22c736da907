from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .board import BoardState, Player, as_player
from .config import Settings, load_settings
from .errors import InvalidInputError
from .game import play_game, play_match
from .interaction import CliUserInteraction
from .lines import classify
from .search import analyse_each_move, evaluate_score, suggest_next_move
from .view import display_grid


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-engine", description="Tic-tac-toe negamax engine")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )

    p_show = sub.add_parser("show", help="Render a board (9 digits, 0=empty,1=X,2=O)")
    p_show.add_argument("--board", required=True, help="Board string, e.g., 100020200")

    p_win = sub.add_parser("winner", help="Report the outcome of a board")
    p_win.add_argument("--board", required=True, help="Board string, e.g., 111220000")

    for name, help_text in (
        ("evaluate", "Score a board for the player to move (+1 win, 0 draw, -1 loss)"),
        ("suggest", "Suggest the best next move for a player"),
    ):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("--board", help="Board string, e.g., 100020200 (omit with --stdin)")
        sp.add_argument(
            "--player",
            type=int,
            choices=[1, 2],
            default=None,
            help="Player to move (default: inferred from piece counts)",
        )
        sp.add_argument(
            "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
        )

    p_play = sub.add_parser("play", help="Play interactively against the engine")
    p_play.add_argument(
        "--human", type=int, choices=[1, 2], default=None, help="Side the human plays (default: 1)"
    )

    p_match = sub.add_parser("match", help="Play the engine against a random opponent")
    p_match.add_argument("--games", type=int, default=10, help="Number of games (default: 10)")
    p_match.add_argument("--seed", type=int, default=None, help="Seed for the random opponent")
    p_match.add_argument(
        "--engine", type=int, choices=[1, 2], default=1, help="Side the engine plays (default: 1)"
    )

    return p


def _print_info() -> None:
    import importlib.util
    import platform

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _player_for(board: BoardState, player: Optional[int]) -> Player:
    return as_player(player) if player is not None else board.current_player()


def _stream(ns: argparse.Namespace) -> int:
    import csv as _csv

    w = _csv.writer(sys.stdout)
    last = "score" if ns.cmd == "evaluate" else "move"
    w.writerow(["board", "player", last])
    for line in sys.stdin:
        raw = line.strip()
        if not raw:
            continue
        try:
            board = BoardState.from_encoding(raw)
        except InvalidInputError:
            logging.debug("skipping invalid board %r", raw)
            continue
        player = _player_for(board, ns.player)
        if ns.cmd == "evaluate":
            w.writerow([raw, int(player), evaluate_score(board, player)])
        else:
            mv = suggest_next_move(board, player)
            w.writerow([raw, int(player), "" if mv is None else mv])
    return 0


def _run(ns: argparse.Namespace, settings: Settings) -> int:
    if ns.cmd in ("evaluate", "suggest") and ns.stdin:
        return _stream(ns)

    if ns.cmd in ("show", "winner", "evaluate", "suggest"):
        board = BoardState.from_encoding((ns.board or "").strip())
        if ns.cmd == "show":
            print(display_grid(board.encoding()))
        elif ns.cmd == "winner":
            logging.info("outcome=%s", classify(board))
        elif ns.cmd == "evaluate":
            player = _player_for(board, ns.player)
            logging.info("player=%d score=%d", player, evaluate_score(board, player))
        else:
            player = _player_for(board, ns.player)
            mv = suggest_next_move(board, player)
            if mv is None:
                logging.info("player=%d move=none (board is full)", player)
            else:
                logging.info("player=%d move=%d cell=%d", player, mv + 1, mv)
            if ns.verbose:
                logging.info("scores=%s", analyse_each_move(board, player))
        return 0

    if ns.cmd == "play":
        human = as_player(ns.human) if ns.human is not None else settings.human_player
        try:
            play_game(CliUserInteraction(), human=human)
        except (EOFError, KeyboardInterrupt):
            logging.warning("Game aborted")
            return 130
        return 0

    if ns.cmd == "match":
        if ns.games < 1:
            logging.error("--games must be positive: %s", ns.games)
            return 2
        seed = ns.seed if ns.seed is not None else settings.seed
        res = play_match(ns.games, seed=seed, engine=ns.engine)
        logging.info(
            "games=%d wins=%d losses=%d draws=%d",
            res.games,
            res.wins,
            res.losses,
            res.draws,
        )
        return 0

    return -1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    try:
        settings = load_settings()
    except InvalidInputError as exc:
        logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
        logging.error("%s", exc)
        return 2
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else settings.log_level,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import PackageNotFoundError, version as _ver

            print(_ver("ttt-engine"))
        except PackageNotFoundError:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    try:
        rc = _run(ns, settings)
    except InvalidInputError as exc:
        logging.error("%s", exc)
        return 2
    if rc >= 0:
        return rc

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
