"""
Movement patterns for the tour pieces.

Each piece kind maps to a fixed, ordered sequence of relative offsets. The order
matters: Warnsdorff ties are broken by whichever offset comes first.
Sliders depend on the board reach (the larger of width and height), which is
passed in explicitly and never read from shared state.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Cell:
    """A 1-indexed board coordinate, also used for offsets between cells."""

    x: int
    y: int

    def __add__(self, other: "Cell") -> "Cell":
        return Cell(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class PieceKind(Enum):
    SHORT_L = "n"
    DIAGONAL_SLIDER = "b"
    ORTHOGONAL_SLIDER = "r"
    OMNI_SLIDER = "q"
    OMNI_STEP = "k"
    WIDE_L = "j"

    @property
    def letter(self) -> str:
        return self.value

    @property
    def is_slider(self) -> bool:
        return self in SLIDERS

    def movement_vectors(self, reach: int) -> Tuple[Cell, ...]:
        return movement_vectors(self, reach)


SLIDERS = frozenset(
    {PieceKind.DIAGONAL_SLIDER, PieceKind.ORTHOGONAL_SLIDER, PieceKind.OMNI_SLIDER}
)

PIECE_NAMES: Dict[PieceKind, str] = {
    PieceKind.SHORT_L: "knight",
    PieceKind.DIAGONAL_SLIDER: "bishop",
    PieceKind.ORTHOGONAL_SLIDER: "rook",
    PieceKind.OMNI_SLIDER: "queen",
    PieceKind.OMNI_STEP: "king",
    PieceKind.WIDE_L: "jack",
}

PIECES_REP: Dict[PieceKind, str] = {
    PieceKind.SHORT_L: "♞",
    PieceKind.DIAGONAL_SLIDER: "♝",
    PieceKind.ORTHOGONAL_SLIDER: "♜",
    PieceKind.OMNI_SLIDER: "♛",
    PieceKind.OMNI_STEP: "♚",
    PieceKind.WIDE_L: "J",
}

SHORT_L_RULES = [(2, 1), (-2, 1), (2, -1), (-2, -1), (1, 2), (-1, 2), (-1, -2), (1, -2)]
WIDE_L_RULES = [(3, 2), (-3, 2), (3, -2), (-3, -2), (2, 3), (-2, 3), (-2, -3), (2, -3)]
# unit directions, scaled by distance for the sliders
ORTHOGONAL = [(1, 0), (-1, 0), (0, -1), (0, 1)]
DIAGONAL = [(1, 1), (-1, 1), (1, -1), (-1, -1)]

_STEP_RULES: Dict[PieceKind, List[Tuple[int, int]]] = {
    PieceKind.SHORT_L: SHORT_L_RULES,
    PieceKind.OMNI_STEP: ORTHOGONAL + DIAGONAL,
    PieceKind.WIDE_L: WIDE_L_RULES,
}

_SLIDER_RULES: Dict[PieceKind, List[Tuple[int, int]]] = {
    PieceKind.DIAGONAL_SLIDER: DIAGONAL,
    PieceKind.ORTHOGONAL_SLIDER: ORTHOGONAL,
    PieceKind.OMNI_SLIDER: ORTHOGONAL + DIAGONAL,
}


def board_reach(width: int, height: int) -> int:
    return width if width > height else height


@lru_cache(maxsize=None)
def movement_vectors(kind: PieceKind, reach: int) -> Tuple[Cell, ...]:
    """Return the ordered offsets a piece of the given kind may move by.

    Step pieces ignore ``reach``. Sliders get one group of offsets per distance
    from 1 to ``reach`` inclusive, groups concatenated by increasing distance.
    Offsets that can never land on the board are kept; the tour filters them
    through its remaining-cell lookups. The result is cached per
    ``(kind, reach)`` and shared between tours.
    """
    if not kind.is_slider:
        return tuple(Cell(dx, dy) for dx, dy in _STEP_RULES[kind])

    directions = _SLIDER_RULES[kind]
    moves = []
    for i in range(1, reach + 1):
        for dx, dy in directions:
            moves.append(Cell(dx * i, dy * i))
    return tuple(moves)
