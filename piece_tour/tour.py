"""
Note! This does not guarantee a full tour. It uses Warnsdorff's heuristic
to walk a path that covers as many cells as possible, never backtracking.
The walk loop itself lives in walk.py; the tour only answers one step at a time.
"""

import logging
from enum import Enum
from typing import FrozenSet, Optional, Set, Tuple

from piece_tour.movement import Cell, PieceKind, board_reach, movement_vectors

logger = logging.getLogger(__name__)


class TourState(Enum):
    uninitialized = 0
    active = 1
    stuck = 2
    complete = 3


class Tour:
    """Remaining cells and current position for a piece tour on a width x height board.

    Width and height must be positive and the start cell inside the board; the
    caller checks this (see board_input.py), the tour does not.
    """

    def __init__(self, width: int, height: int, start: Cell, piece: PieceKind) -> None:
        self.width = width
        self.height = height
        self.cur = start
        self.piece = piece
        self.moves: Tuple[Cell, ...] = movement_vectors(piece, board_reach(width, height))
        self._all: Set[Cell] = set()
        self._started = False

    def __repr__(self) -> str:
        return (
            f"Tour({self.width}x{self.height}, {self.piece.name} at {self.cur}, "
            f"{len(self._all)} left)"
        )

    @property
    def remaining(self) -> FrozenSet[Cell]:
        return frozenset(self._all)

    @property
    def state(self) -> TourState:
        """Where the tour stands right now.

        A legal move wins over check_done: a two cell board right after
        start_tour is done by check_done but still active while the last
        cell is reachable. Complete and stuck only apply once no move is left.
        """
        if not self._started:
            return TourState.uninitialized
        if self.has_next():
            return TourState.active
        return TourState.complete if self.check_done() else TourState.stuck

    def start_tour(self, loc: Cell) -> None:
        """Fill the remaining set with every cell, then drop the starting one.

        Also moves cur to loc, so restarting from another cell leaves cur out
        of the remaining set.
        """
        self._all = {
            Cell(i, j)
            for i in range(1, self.width + 1)
            for j in range(1, self.height + 1)
        }
        self._started = True
        self.cur = loc
        self.remove_from_all(loc)
        logger.debug(f"Tour started at {loc} with {len(self._all)} cells left")

    def has_next(self) -> bool:
        return any(self.cur + move in self._all for move in self.moves)

    def next(self) -> Optional[Cell]:
        """Pick the reachable cell with the fewest onward moves (Warnsdorff's rule).

        Candidates are scanned in movement order and only a strictly smaller
        degree replaces the best so far, so the earliest offset wins ties.
        Nothing is mutated; the caller moves the tour along.
        """
        result = None
        min_deg = len(self.moves) + 1
        for move in self.moves:
            next_spot = self.cur + move
            if next_spot in self._all:
                deg = self.count_next(next_spot)
                if deg < min_deg:
                    min_deg = deg
                    result = next_spot
        if result is not None:
            logger.debug(f"Best move from {self.cur} is {result} (degree {min_deg})")
        return result

    def count_next(self, loc: Cell) -> int:
        """Onward degree of loc: remaining cells one move away, never counting cur."""
        count = 0
        for move in self.moves:
            next_spot = loc + move
            # the walk only drops cur from the set once it has moved off it
            if next_spot in self._all and next_spot != self.cur:
                count += 1
        return count

    def update_cur(self, loc: Cell) -> None:
        self.cur = loc

    def remove_from_all(self, loc: Cell) -> None:
        self._all.discard(loc)

    def check_done(self) -> bool:
        """True when at most one cell is left unvisited."""
        return len(self._all) < 2
