#! /usr/bin/env python
"""Textual viewer replaying a walked tour move by move on a checkerboard."""

from typing import Dict, Optional

from textual.app import App, ComposeResult
from textual.containers import Grid
from textual.timer import Timer
from textual.widgets import Footer, Static

from piece_tour.movement import PIECE_NAMES, PIECES_REP, Cell
from piece_tour.walk import TourResult

DEFAULT_INTERVAL = 0.3


class TourViewerApp(App[None]):
    CSS = """
    Grid {
        height: 1fr;
        & .cell {
            width: 1fr;
            height: 1fr;
            content-align: center middle;
        }
        & .dark { background: #a36103; color: white; }
        & .light { background: #f2daa2; color: black; }
        & .visited { text-style: bold; }
        & .current { background: #1f6feb; color: white; }
    }
    #status {
        height: 1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("space", "toggle_pause", "Pause/resume"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, result: TourResult, interval: float = DEFAULT_INTERVAL):
        super().__init__()
        self.result = result
        self.interval = interval
        # every cell widget, by board coordinate
        self.grid_widgets: Dict[Cell, Static] = {}
        self.shown = 0
        self.paused = False
        self._timer: Optional[Timer] = None

    @property
    def finished(self) -> bool:
        return self.shown >= len(self.result.path)

    def compose(self) -> ComposeResult:
        grid = Grid()
        grid.styles.grid_size_columns = self.result.width
        grid.styles.grid_size_rows = self.result.height
        with grid:
            for y in range(self.result.height, 0, -1):
                for x in range(1, self.result.width + 1):
                    color_class = "dark" if (x + y) % 2 == 0 else "light"
                    widget = Static("", classes=f"cell {color_class}")
                    self.grid_widgets[Cell(x, y)] = widget
                    yield widget
        yield Static(self._status_text(), id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.title = (
            f"{PIECE_NAMES[self.result.piece]} tour on "
            f"{self.result.width}x{self.result.height}"
        )
        self._timer = self.set_interval(self.interval, self.advance)

    def _status_text(self) -> str:
        if self.finished:
            return self.result.summary()
        return f"Move {max(self.shown - 1, 0)} of {self.result.moves}"

    def advance(self) -> None:
        """Reveal the next cell of the path, or stop once everything is shown."""
        if self.finished:
            if self._timer is not None:
                self._timer.stop()
            return
        if self.shown:
            prev = self.grid_widgets[self.result.path[self.shown - 1]]
            prev.remove_class("current")
            prev.update(str(self.shown))
        cell = self.result.path[self.shown]
        widget = self.grid_widgets[cell]
        widget.add_class("visited", "current")
        widget.update(PIECES_REP[self.result.piece])
        self.shown += 1
        self.query_one("#status", Static).update(self._status_text())

    def action_toggle_pause(self) -> None:
        if self._timer is None or self.finished:
            return
        self.paused = not self.paused
        if self.paused:
            self._timer.pause()
        else:
            self._timer.resume()


if __name__ == "__main__":
    from piece_tour.movement import PieceKind
    from piece_tour.walk import run_tour

    app = TourViewerApp(run_tour(8, 8, PieceKind.SHORT_L, start=Cell(1, 1)))
    app.run()
