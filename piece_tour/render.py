"""Text renderings of a walked tour: plain for logs and tests, rich for the terminal."""

from typing import Dict, List, Optional, Sequence

from rich.console import Console
from rich.text import Text

from piece_tour.movement import PIECES_REP, Cell
from piece_tour.walk import TourResult

DARK_SQUARE = "#a36103"
LIGHT_SQUARE = "#f2daa2"


def visit_order(path: Sequence[Cell]) -> Dict[Cell, int]:
    """Map each visited cell to its 1-based position in the path."""
    return {cell: pos for pos, cell in enumerate(path, start=1)}


def _cell_width(width: int, height: int) -> int:
    return len(str(width * height)) + 1


def render_board(width: int, height: int, path: Sequence[Cell]) -> str:
    """Board with the visit number on each cell, '.' where the piece never went.

    The top line is the highest y, x grows to the right, as on a chess diagram.
    """
    order = visit_order(path)
    cw = _cell_width(width, height)
    label_w = len(str(height))
    lines: List[str] = []
    for y in range(height, 0, -1):
        line = f"{y:>{label_w}} |"
        for x in range(1, width + 1):
            mark = order.get(Cell(x, y))
            line += f"{'.' if mark is None else mark:>{cw}}"
        lines.append(line)
    lines.append(" " * label_w + " +" + "-" * (cw * width))
    lines.append(" " * (label_w + 2) + "".join(f"{x:>{cw}}" for x in range(1, width + 1)))
    return "\n".join(lines)


def print_board(result: TourResult, console: Optional[Console] = None) -> None:
    console = console or Console()
    order = visit_order(result.path)
    cw = _cell_width(result.width, result.height) + 1
    for y in range(result.height, 0, -1):
        row = Text(f"{y:>3} ")
        for x in range(1, result.width + 1):
            cell = Cell(x, y)
            bg = DARK_SQUARE if (x + y) % 2 == 0 else LIGHT_SQUARE
            if cell == result.last:
                label = PIECES_REP[result.piece]
            else:
                label = str(order.get(cell, ""))
            row.append(f"{label:^{cw}}", style=f"black on {bg}")
        console.print(row)
    console.print(
        Text(result.summary(), style="bold green" if result.completed else "bold red")
    )
