import io

import pytest
from rich.console import Console

from piece_tour import cli
from piece_tour.movement import Cell, PieceKind


def _console():
    return Console(file=io.StringIO(), width=100, color_system=None)


def _answers(*values):
    it = iter(values)
    return lambda prompt: next(it)


def test_complete_tour_exits_zero():
    console = _console()
    code = cli.main(
        ["--width", "2", "--height", "2", "--piece", "q", "--start", "1,1"],
        console=console,
    )
    out = console.file.getvalue()
    assert code == cli.EXIT_COMPLETE
    assert "0 : moving from (1, 1) to (2, 1)" in out
    assert "We did it!" in out


def test_stuck_tour_exits_one():
    console = _console()
    code = cli.main(
        ["--width", "2", "--height", "2", "--piece", "n", "--start", "1,1", "--quiet"],
        console=console,
    )
    assert code == cli.EXIT_STUCK
    assert "moving from" not in console.file.getvalue()


def test_bad_dimensions_exit_two():
    console = _console()
    code = cli.main(["--width", "0", "--height", "3", "--piece", "k"], console=console)
    assert code == cli.EXIT_BAD_INPUT
    assert "greater than 0" in console.file.getvalue()


def test_start_off_board_exit_two():
    code = cli.main(
        ["--width", "3", "--height", "3", "--piece", "k", "--start", "4,4"],
        console=_console(),
    )
    assert code == cli.EXIT_BAD_INPUT


def test_unknown_piece_letter_is_rejected_by_parser():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--piece", "z"], console=_console())
    assert excinfo.value.code == 2


def test_missing_values_are_prompted():
    console = _console()
    code = cli.main(
        ["--start", "1,1", "--quiet"], read=_answers("2", "2", "q"), console=console
    )
    assert code == cli.EXIT_COMPLETE


def test_collect_options_keeps_command_line_values():
    args = cli.build_parser().parse_args(
        ["--width", "5", "--height", "6", "--piece", "j", "--seed", "3", "--view"]
    )
    options = cli.collect_options(args, read=_answers())
    assert options.width == 5
    assert options.height == 6
    assert options.piece == PieceKind.WIDE_L
    assert options.seed == 3
    assert options.view
    assert options.start is None


def test_parser_reads_start_cell():
    args = cli.build_parser().parse_args(["--start", "2,3"])
    assert args.start == Cell(2, 3)


def test_prompt_hints_go_to_the_console():
    console = _console()
    code = cli.main(
        ["--start", "1,1", "--quiet"],
        read=_answers("two", "2", "2", "x", "q"),
        console=console,
    )
    out = console.file.getvalue()
    assert code == cli.EXIT_COMPLETE
    assert "Please only type positive integers" in out
    assert "Please select a valid piece" in out
