import io

from rich.console import Console

from piece_tour.movement import Cell, PieceKind
from piece_tour.render import print_board, render_board, visit_order
from piece_tour.walk import TourResult

QUEEN_2X2_PATH = [Cell(1, 1), Cell(2, 1), Cell(2, 2), Cell(1, 2)]


def _console():
    return Console(file=io.StringIO(), width=80, color_system=None)


def test_visit_order_is_one_based():
    assert visit_order(QUEEN_2X2_PATH) == {
        Cell(1, 1): 1,
        Cell(2, 1): 2,
        Cell(2, 2): 3,
        Cell(1, 2): 4,
    }


def test_render_full_board():
    assert render_board(2, 2, QUEEN_2X2_PATH) == "\n".join(
        [
            "2 | 4 3",
            "1 | 1 2",
            "  +----",
            "    1 2",
        ]
    )


def test_render_marks_unvisited_cells():
    text = render_board(3, 1, [Cell(2, 1)])
    assert text.splitlines()[0] == "1 | . 1 ."


def test_print_board_shows_piece_and_outcome():
    console = _console()
    result = TourResult(2, 2, PieceKind.OMNI_SLIDER, path=QUEEN_2X2_PATH, completed=True)
    print_board(result, console=console)
    out = console.file.getvalue()
    assert "♛" in out
    assert "We did it!" in out
    assert len(out.splitlines()) == 3


def test_print_board_reports_stuck():
    console = _console()
    result = TourResult(2, 2, PieceKind.SHORT_L, path=[Cell(1, 1)])
    print_board(result, console=console)
    assert "We didn't find the path." in console.file.getvalue()
