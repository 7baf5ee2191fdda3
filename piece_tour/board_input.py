"""Collecting and checking the board size, start cell and piece for a tour."""

from typing import Callable, Optional

from piece_tour.movement import PIECE_NAMES, Cell, PieceKind

PIECE_CHOICES = ", ".join(f"{kind.letter} = {PIECE_NAMES[kind]}" for kind in PieceKind)


class PieceTourError(ValueError):
    pass


class InvalidDimensionError(PieceTourError):
    pass


class OutOfRangeStartError(PieceTourError):
    pass


class UnknownPieceError(PieceTourError):
    pass


class InvalidCellError(PieceTourError):
    pass


def validate_dimensions(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise InvalidDimensionError(
            f"Width and height must be greater than 0, got {width}x{height}."
        )


def validate_start(start: Cell, width: int, height: int) -> None:
    if not (1 <= start.x <= width and 1 <= start.y <= height):
        raise OutOfRangeStartError(
            f"Start {start} is outside the {width}x{height} board."
        )


def parse_piece(letter: str) -> PieceKind:
    try:
        return PieceKind(letter.strip().lower())
    except ValueError:
        raise UnknownPieceError(
            f"Unknown piece '{letter}', pick one of: {PIECE_CHOICES}"
        ) from None


def parse_cell(text: str) -> Cell:
    """very minimal validation, expects 'x,y'"""
    parts = text.replace(" ", "").split(",")
    if len(parts) != 2 or not all(p.lstrip("-").isdigit() for p in parts):
        raise InvalidCellError(f"Input {text} incorrect format, expected x,y")
    return Cell(int(parts[0]), int(parts[1]))


def prompt_dimension(
    label: str,
    read: Callable[[str], str] = input,
    write: Optional[Callable[[str], None]] = print,
) -> int:
    """Ask for a board dimension until a positive integer is typed."""
    while True:
        answer = read(f"Please enter a {label} (integer): ").strip()
        if answer.isdigit() and int(answer) > 0:
            return int(answer)
        if write is not None:
            write("Please only type positive integers")


def prompt_piece(
    read: Callable[[str], str] = input,
    write: Optional[Callable[[str], None]] = print,
) -> PieceKind:
    while True:
        answer = read(f"Please pick a piece to tour with ({PIECE_CHOICES}): ")
        try:
            return parse_piece(answer)
        except UnknownPieceError:
            if write is not None:
                write("Please select a valid piece")
