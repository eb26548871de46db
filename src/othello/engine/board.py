from __future__ import annotations

from math import isqrt
from typing import Iterator, Optional

from othello.engine.geometry import STEP_DIRECTIONS, Square, Step
from othello.engine.move import Move
from othello.engine.piece import Piece


class OccupiedSquare(Exception):
    pass


class Board:
    """
    Board stores the cell states of an NxN othello game.

    Cells are stored row major (`y * size + x`). The set of empty squares is
    kept up to date on every placement, so move generation never has to scan
    the whole grid for empty cells.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self.cells = [Piece.EMPTY] * (size * size)

        row = (size - 1) // 2 if size % 2 == 0 else (size - 1) // 2 - 1
        col = size // 2

        self.cells[row * size + row] = Piece.WHITE
        self.cells[row * size + col] = Piece.BLACK
        self.cells[col * size + row] = Piece.BLACK
        self.cells[col * size + col] = Piece.WHITE

        self.empty_squares = {
            square for square in self.squares() if self.get_square(square) == Piece.EMPTY
        }

    @classmethod
    def from_squares(cls, squares: list[Piece]) -> Board:
        size = isqrt(len(squares))
        if size * size != len(squares):
            raise ValueError(f"Cannot make a square board from {len(squares)} cells")

        board = cls.__new__(cls)
        board.size = size
        board.cells = [Piece(square) for square in squares]
        board.empty_squares = {
            square for square in board.squares() if board.get_square(square) == Piece.EMPTY
        }
        return board

    @classmethod
    def from_log_entry(cls, entry: str) -> Board:
        return cls.from_squares([Piece.from_char(char) for char in entry])

    def squares(self) -> Iterator[Square]:
        for y in range(self.size):
            for x in range(self.size):
                yield Square(x, y)

    def is_on_board(self, square: Square) -> bool:
        return 0 <= square.x < self.size and 0 <= square.y < self.size

    def get_square(self, square: Square) -> Optional[Piece]:
        # None marks off-board, ray scans stop on it.
        if not self.is_on_board(square):
            return None
        return self.cells[square.y * self.size + square.x]

    def _set_square(self, square: Square, piece: Piece) -> None:
        if not self.is_on_board(square):
            raise ValueError(f"Invalid coordinates {square}")
        self.cells[square.y * self.size + square.x] = piece

    def can_play(self) -> bool:
        return len(self.empty_squares) != 0

    def place_piece(self, move: Move) -> None:
        start = move.square
        if self.get_square(start) != Piece.EMPTY:
            raise OccupiedSquare(f"Trying to place disk to an occupied square {start}")

        self._set_square(start, move.disk)
        self.empty_squares.remove(start)

        opponent = move.disk.opponent()
        for step in move.directions:
            square = start + step
            while self.get_square(square) == opponent:
                self._set_square(square, move.disk)
                square += step

    def _count_flips(self, square: Square, step: Step, color: Piece) -> int:
        other = color.opponent()
        square += step

        # The neighbour in this direction must be an opponent disc.
        if self.get_square(square) != other:
            return 0

        steps = 0
        while self.get_square(square) == other:
            steps += 1
            square += step

        # The line of opponent discs must end in an own disc.
        if self.get_square(square) != color:
            return 0

        return steps

    def possible_moves(self, color: Piece) -> list[Move]:
        assert color in [Piece.BLACK, Piece.WHITE]

        moves: list[Move] = []

        for square in self.empty_squares:
            value = 0
            directions: list[Step] = []

            for step in STEP_DIRECTIONS:
                flips = self._count_flips(square, step, color)
                if flips == 0:
                    continue

                value += flips
                directions.append(step)

            if value > 0:
                moves.append(Move(square, value, color, directions))

        moves.sort()
        return moves

    def player_scores(self) -> tuple[int, int]:
        black = 0
        white = 0
        for cell in self.cells:
            if cell == Piece.BLACK:
                black += 1
            elif cell == Piece.WHITE:
                white += 1
        return black, white

    def count(self, color: Piece) -> int:
        assert color in [Piece.BLACK, Piece.WHITE]

        black, white = self.player_scores()
        return white if color == Piece.WHITE else black

    def disc_count(self) -> int:
        return self.size * self.size - len(self.empty_squares)

    def empty_count(self) -> int:
        return len(self.empty_squares)

    def score(self) -> int:
        return sum(self.cells)

    def result(self) -> Piece:
        score = self.score()
        if score == 0:
            return Piece.EMPTY
        return Piece.WHITE if score > 0 else Piece.BLACK

    def clone(self) -> Board:
        board = Board.__new__(Board)
        board.size = self.size
        board.cells = list(self.cells)
        board.empty_squares = set(self.empty_squares)
        return board

    def __copy__(self) -> Board:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, object]) -> Board:
        return self.clone()

    def to_log_entry(self) -> str:
        return "".join(cell.board_char() for cell in self.cells)

    def __str__(self) -> str:
        indices = range(self.size)
        text = " " + "".join(f" {i}" for i in indices)
        for y in indices:
            text += f"\n{y}"
            for x in indices:
                text += f" {self.cells[y * self.size + x].board_char()}"
        return text

    def __repr__(self) -> str:
        return f"Board({self.size}, {self.to_log_entry()!r})"

    def as_tuple(self) -> tuple[int, tuple[Piece, ...]]:
        return (self.size, tuple(self.cells))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_tuple() == other.as_tuple()
