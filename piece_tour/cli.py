#! /usr/bin/env python
"""
Walk a piece over a board with Warnsdorff's rule and show where it went.

    piece-tour --width 8 --height 8 --piece n --start 1,1
    piece-tour --piece k --view

Anything not given on the command line is asked for interactively.
"""

import argparse
import logging
import random
import sys
from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console

from piece_tour.board_input import (
    PIECE_CHOICES,
    PieceTourError,
    parse_cell,
    parse_piece,
    prompt_dimension,
    prompt_piece,
)
from piece_tour.movement import Cell, PieceKind
from piece_tour.render import print_board
from piece_tour.viewer import DEFAULT_INTERVAL, TourViewerApp
from piece_tour.walk import run_tour

LOG_LEVEL = logging.WARNING

EXIT_COMPLETE = 0
EXIT_STUCK = 1
EXIT_BAD_INPUT = 2


@dataclass
class TourOptions:
    width: int
    height: int
    piece: PieceKind
    start: Optional[Cell] = None
    seed: Optional[int] = None
    view: bool = False
    interval: float = DEFAULT_INTERVAL
    quiet: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Walk a chess-like piece over a board using Warnsdorff's rule."
    )
    parser.add_argument("--width", type=int, default=None, help="Board width")
    parser.add_argument("--height", type=int, default=None, help="Board height")
    parser.add_argument(
        "--piece", type=parse_piece, default=None, help=f"Piece letter ({PIECE_CHOICES})"
    )
    parser.add_argument(
        "--start", type=parse_cell, default=None, help="Start cell as x,y (random if omitted)"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the random start cell"
    )
    parser.add_argument(
        "--view", action="store_true", help="Replay the tour in a textual viewer"
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=DEFAULT_INTERVAL,
        help="Seconds between moves in the viewer",
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Do not print every move"
    )
    parser.add_argument(
        "--log-level",
        default=logging.getLevelName(LOG_LEVEL),
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level",
    )
    return parser


def collect_options(args: argparse.Namespace, read=input, write=print) -> TourOptions:
    """Fill in whatever the command line left out by asking the user."""
    width = args.width
    if width is None:
        width = prompt_dimension("width", read, write)
    height = args.height
    if height is None:
        height = prompt_dimension("height", read, write)
    piece = args.piece
    if piece is None:
        piece = prompt_piece(read, write)
    return TourOptions(
        width=width,
        height=height,
        piece=piece,
        start=args.start,
        seed=args.seed,
        view=args.view,
        interval=args.interval,
        quiet=args.quiet,
    )


def main(argv: Optional[List[str]] = None, read=input, console: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s:%(name)s:%(message)s"
    )
    console = console or Console()

    try:
        options = collect_options(args, read=read, write=console.print)

        def show_step(i: int, curr: Cell, nxt: Cell) -> None:
            console.print(f"{i} : moving from {curr} to {nxt}")

        result = run_tour(
            options.width,
            options.height,
            options.piece,
            start=options.start,
            rng=random.Random(options.seed),
            on_step=None if options.quiet or options.view else show_step,
        )
    except PieceTourError as exc:
        console.print(f"[red]{exc}[/red]")
        return EXIT_BAD_INPUT

    if options.view:
        TourViewerApp(result, interval=options.interval).run()
        console.print(result.summary())
    else:
        print_board(result, console=console)
    return EXIT_COMPLETE if result.completed else EXIT_STUCK


if __name__ == "__main__":
    sys.exit(main())
