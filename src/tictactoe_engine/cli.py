from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .board import current_player, deserialize_board, is_valid_state, serialize_board
from .history import GameHistory
from .render import render_board, render_game
from .winner import evaluate, game_status, winning_cells


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe move history CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    p_replay = sub.add_parser("replay", help="Replay a move sequence and print the game")
    p_replay.add_argument(
        "--moves", default="", help='Comma-separated cell indices 0-8, e.g. "0,4,1,5,2"'
    )
    p_replay.add_argument(
        "--jump", type=int, default=None, help="History entry to view after replaying (0 = game start)"
    )
    p_replay.add_argument(
        "--descending", action="store_true", help="List moves newest first"
    )

    p_status = sub.add_parser(
        "status",
        help="Show status for a board (9 digits, 0=empty,1=X,2=O)",
    )
    p_status.add_argument("--board", required=True, help="Board string, e.g., 100020200")

    return p


def _parse_moves(raw: str) -> List[int]:
    return [int(x) for x in raw.split(",") if x.strip()]


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe-engine"))
        except Exception:
            print("unknown")
        return 0

    if ns.cmd == "replay":
        try:
            moves = _parse_moves(ns.moves)
        except ValueError:
            logging.error("Invalid move list %r. Must be comma-separated integers.", ns.moves)
            return 2
        game, accepted = GameHistory.from_moves(moves)
        if accepted < len(moves):
            logging.warning("Move %d (cell %s) rejected; ignoring %d remaining move(s)",
                            accepted + 1, moves[accepted], len(moves) - accepted - 1)
        if ns.jump is not None and not game.jump_to(ns.jump):
            logging.warning("Cannot jump to entry %d; history has %d entries", ns.jump, len(game))
        print(render_game(game, ascending=not ns.descending))
        return 0

    if ns.cmd == "status":
        try:
            grid = deserialize_board(ns.board)
        except ValueError as exc:
            logging.error("%s", exc)
            return 2
        if not is_valid_state(grid):
            logging.error("Board is not a valid reachable state.")
            return 2
        result = evaluate(grid)
        print(game_status(grid, current_player(grid)))
        print(render_board(grid, winning_cells(grid)))
        if result is not None:
            logging.info("board=%s winner=%s line=%s",
                         serialize_board(grid), result.winner.name, list(result.line))
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
