from piece_tour.movement import Cell, PieceKind, board_reach, movement_vectors
from piece_tour.tour import Tour, TourState
from piece_tour.walk import TourResult, pick_start, run_tour, watch_tour

__all__ = [
    "Cell",
    "PieceKind",
    "Tour",
    "TourResult",
    "TourState",
    "board_reach",
    "movement_vectors",
    "pick_start",
    "run_tour",
    "watch_tour",
]
