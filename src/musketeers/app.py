"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from musketeers.core.board import Board
from musketeers.core.errors import LoadError
from musketeers.game.controller import GameController
from musketeers.game.session import SessionConfig, TextSession
from musketeers.game.storage import DEFAULT_OUTPUT_PREFIX, load_board, saved_board_path

_LOGGER = logging.getLogger(__name__)

_DEFAULT_BOARD_NAME = "board.txt"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="musketeers",
        description="The Three Musketeers board game.",
    )
    parser.add_argument(
        "board",
        nargs="?",
        type=Path,
        help="board file to start from (default: built-in layout)",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="play in the desktop window instead of the terminal",
    )
    parser.add_argument(
        "--output-prefix",
        default=DEFAULT_OUTPUT_PREFIX,
        help="file name prefix of the saved board (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Launch a game in the terminal or, with ``--gui``, in a window."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    input_path: Path = args.board or Path(_DEFAULT_BOARD_NAME)
    save_path = saved_board_path(input_path, args.output_prefix)

    board: Board | None = None
    if args.board is not None:
        try:
            board = load_board(args.board)
        except LoadError as exc:
            print(exc, file=sys.stderr)
            print("Failed to read the board from the file.", file=sys.stderr)
            return 1

    if args.gui:
        from musketeers.ui.bootstrap import run_application

        return run_application(sys.argv[:1], board=board, save_path=save_path)

    controller = GameController()
    controller.new_game(board)
    session = TextSession(
        controller, sys.stdin, sys.stdout, SessionConfig(save_path=save_path)
    )
    state = session.run()
    _LOGGER.info("Session ended in phase %s", state.phase.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
