from __future__ import annotations

from enum import IntEnum


class Piece(IntEnum):
    """
    State of a single board cell.

    The numeric values are chosen so that summing all cells of a board gives
    a signed score: positive means white leads, negative means black leads.
    """

    BLACK = -1
    EMPTY = 0
    WHITE = 1

    def opponent(self) -> Piece:
        if self == Piece.EMPTY:
            return Piece.EMPTY
        return Piece.BLACK if self == Piece.WHITE else Piece.WHITE

    def board_char(self) -> str:
        if self == Piece.EMPTY:
            return "_"
        return "W" if self == Piece.WHITE else "B"

    def display_name(self) -> str:
        return self.name

    @classmethod
    def from_char(cls, char: str) -> Piece:
        try:
            return {"B": cls.BLACK, "W": cls.WHITE, "_": cls.EMPTY}[char]
        except KeyError:
            raise ValueError(f'Invalid board character "{char}"') from None


BLACK = Piece.BLACK
WHITE = Piece.WHITE
EMPTY = Piece.EMPTY
