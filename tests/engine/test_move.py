import pytest

from othello.engine.geometry import Square, Step
from othello.engine.move import Move
from othello.engine.piece import BLACK, EMPTY, WHITE


def test_sorting() -> None:
    moves = [
        Move(Square(0, 0), 1, BLACK, [Step(1, 0)]),
        Move(Square(5, 1), 3, BLACK, [Step(1, 0)]),
        Move(Square(2, 2), 1, BLACK, [Step(1, 0)]),
        Move(Square(0, 7), 3, BLACK, [Step(1, 0)]),
        Move(Square(0, 3), 1, BLACK, [Step(1, 0)]),
    ]

    squares = [move.square for move in sorted(moves)]

    assert squares == [
        Square(0, 7),
        Square(5, 1),
        Square(0, 0),
        Square(0, 3),
        Square(2, 2),
    ]


def test_log_entry() -> None:
    move = Move(Square(1, 3), 2, WHITE, [Step(0, -1)])
    assert move.to_log_entry() == "W:(1,3),2"
    assert str(move) == "Square: (1,3) -> value: 2"


def test_empty_disk_rejected() -> None:
    with pytest.raises(AssertionError):
        Move(Square(0, 0), 1, EMPTY, [])
