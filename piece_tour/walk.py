"""Driving a Tour from its start cell until it completes or gets stuck."""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from piece_tour.board_input import validate_dimensions, validate_start
from piece_tour.movement import Cell, PieceKind
from piece_tour.tour import Tour

logger = logging.getLogger(__name__)

StepCallback = Callable[[int, Cell, Cell], None]


@dataclass
class TourResult:
    width: int
    height: int
    piece: PieceKind
    path: List[Cell] = field(default_factory=list)
    completed: bool = False

    @property
    def moves(self) -> int:
        return max(len(self.path) - 1, 0)

    @property
    def last(self) -> Optional[Cell]:
        return self.path[-1] if self.path else None

    def summary(self) -> str:
        if self.completed:
            return (
                f"We did it! Visited {len(self.path)} of {self.width * self.height} cells."
            )
        return (
            f"We didn't find the path. Stuck at {self.last} after {self.moves} moves, "
            f"{len(self.path)} of {self.width * self.height} cells visited."
        )


def pick_start(width: int, height: int, rng: Optional[random.Random] = None) -> Cell:
    """Random start cell; never on the last column or row of a board wider than 1."""
    rng = rng or random.Random()
    x_start = 1 if width == 1 else rng.randint(1, width - 1)
    y_start = 1 if height == 1 else rng.randint(1, height - 1)
    return Cell(x_start, y_start)


def watch_tour(
    tour: Tour, start: Cell, on_step: Optional[StepCallback] = None
) -> TourResult:
    """Walk the tour one Warnsdorff move at a time, reporting every segment."""
    tour.start_tour(start)
    result = TourResult(tour.width, tour.height, tour.piece, path=[start])
    curr = start
    i = 0
    while tour.has_next():
        nxt = tour.next()
        logger.debug(f"{i} : moving from {curr} to {nxt}")
        if on_step is not None:
            on_step(i, curr, nxt)
        tour.remove_from_all(curr)
        curr = nxt
        tour.update_cur(nxt)
        result.path.append(nxt)
        i += 1

    result.completed = tour.check_done()
    if result.completed:
        logger.info(f"Tour complete after {result.moves} moves")
    else:
        logger.info(f"Tour stuck at {curr} after {result.moves} moves")
    return result


def run_tour(
    width: int,
    height: int,
    piece: PieceKind,
    start: Optional[Cell] = None,
    rng: Optional[random.Random] = None,
    on_step: Optional[StepCallback] = None,
) -> TourResult:
    validate_dimensions(width, height)
    if start is None:
        start = pick_start(width, height, rng)
    validate_start(start, width, height)
    logger.info(
        f"Touring a {width}x{height} board with {piece.name} from {start}"
    )
    return watch_tour(Tour(width, height, start, piece), start, on_step=on_step)
