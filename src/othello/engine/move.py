from __future__ import annotations

from typing import Iterable

from othello.engine.geometry import Square, Step
from othello.engine.piece import Piece


class Move:
    """
    A disc placement for one color.

    `value` is the total number of opponent discs flipped and `directions` are
    the steps that each end in a disc of the mover's color.

    Moves rank by descending value, ties go to the lower square.
    """

    def __init__(
        self, square: Square, value: int, disk: Piece, directions: Iterable[Step]
    ) -> None:
        assert disk in [Piece.BLACK, Piece.WHITE]

        self.square = square
        self.value = value
        self.disk = disk
        self.directions = tuple(directions)

    def sort_key(self) -> tuple[int, int, int]:
        return (-self.value, self.square.x, self.square.y)

    def to_log_entry(self) -> str:
        return f"{self.disk.board_char()}:{self.square},{self.value}"

    def __repr__(self) -> str:
        return f"Move({self.square!r}, {self.value}, {self.disk.name})"

    def __str__(self) -> str:
        return f"Square: {self.square} -> value: {self.value}"

    def as_tuple(self) -> tuple[Square, int, Piece, tuple[Step, ...]]:
        return (self.square, self.value, self.disk, self.directions)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            raise TypeError(f"Cannot compare Move with {type(other)}")

        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other: Move) -> bool:
        return self.sort_key() < other.sort_key()
