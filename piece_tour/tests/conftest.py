import sys
from pathlib import Path

import pytest

# Ensure the project root is importable when pytest starts from any directory
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from piece_tour.movement import Cell, PieceKind  # noqa: E402
from piece_tour.tour import Tour  # noqa: E402


@pytest.fixture
def king_tour():
    """8x8 king tour sitting in the a1 corner, freshly started."""
    tour = Tour(8, 8, Cell(1, 1), PieceKind.OMNI_STEP)
    tour.start_tour(Cell(1, 1))
    return tour


@pytest.fixture
def knight_tour_5x5():
    tour = Tour(5, 5, Cell(1, 1), PieceKind.SHORT_L)
    tour.start_tour(Cell(1, 1))
    return tour
