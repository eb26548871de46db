from __future__ import annotations

from functools import lru_cache
from math import floor

from othello.engine.board import Board
from othello.engine.geometry import Square
from othello.engine.piece import Piece

DISC_DIFFERENCE = "disc_difference"
MOBILITY = "mobility"
CORNER_CONTROL = "corner_control"
STABILITY = "stability"
PARITY = "parity"
SQUARE_WEIGHTS = "square_weights"

CORNER_WEIGHT = 20
EDGE_WEIGHT = 5
ADJACENT_TO_CORNER_WEIGHT = -5


def midgame_threshold(size: int) -> int:
    return size * size // 3


def endgame_threshold(size: int) -> int:
    return floor(size * size * 0.96)


def is_active(board: Board, heuristic: str) -> bool:
    disc_count = board.disc_count()

    if heuristic in [DISC_DIFFERENCE, PARITY]:
        return disc_count > midgame_threshold(board.size)
    if heuristic in [MOBILITY, SQUARE_WEIGHTS]:
        return disc_count < endgame_threshold(board.size)
    if heuristic in [CORNER_CONTROL, STABILITY]:
        return True

    raise ValueError(f'Unknown heuristic "{heuristic}"')


def corners(size: int) -> list[Square]:
    return [
        Square(0, 0),
        Square(0, size - 1),
        Square(size - 1, 0),
        Square(size - 1, size - 1),
    ]


@lru_cache
def square_weights(size: int) -> tuple[tuple[int, ...], ...]:
    """
    Static weight per square, indexed as `weights[x][y]`.

    Corners are worth the most, edges a little. The three squares touching a
    corner are negative since taking them early tends to give the corner away.
    These overwrite the edge weights next to each corner.
    """
    last = size - 1
    weights = [[0] * size for _ in range(size)]

    for x, y in [(0, 0), (0, last), (last, 0), (last, last)]:
        weights[x][y] = CORNER_WEIGHT

    for i in range(1, last):
        weights[0][i] = EDGE_WEIGHT
        weights[last][i] = EDGE_WEIGHT
        weights[i][0] = EDGE_WEIGHT
        weights[i][last] = EDGE_WEIGHT

    adjacent = [
        (1, 0),
        (0, 1),
        (1, 1),
        (last - 1, 0),
        (last, 1),
        (last - 1, 1),
        (0, last - 1),
        (1, last),
        (1, last - 1),
        (last, last - 1),
        (last - 1, last),
        (last - 1, last - 1),
    ]
    for x, y in adjacent:
        weights[x][y] = ADJACENT_TO_CORNER_WEIGHT

    return tuple(tuple(column) for column in weights)


def count_corners(board: Board, color: Piece) -> int:
    return sum(1 for corner in corners(board.size) if board.get_square(corner) == color)


def count_mobility(board: Board, color: Piece) -> int:
    return len(board.possible_moves(color))


def calculate_stability(board: Board, color: Piece) -> int:
    # Simplified proxy: corners plus every edge disc, so corners count twice.
    score = count_corners(board, color)
    last = board.size - 1

    for x in range(board.size):
        if board.get_square(Square(x, 0)) == color:
            score += 1
        if board.get_square(Square(x, last)) == color:
            score += 1

    for y in range(1, last):
        if board.get_square(Square(0, y)) == color:
            score += 1
        if board.get_square(Square(last, y)) == color:
            score += 1

    return score


def calculate_parity(board: Board) -> int:
    return 1 if board.empty_count() % 2 == 1 else -1


def calculate_square_weights(board: Board, color: Piece) -> int:
    weights = square_weights(board.size)
    opponent = color.opponent()
    score = 0

    for square in board.squares():
        cell = board.get_square(square)
        if cell == color:
            score += weights[square.x][square.y]
        elif cell == opponent:
            score -= weights[square.x][square.y]

    return score


def heuristic_terms(board: Board, color: Piece) -> dict[str, float]:
    """
    Compute every heuristic that is active in the current game phase.

    Inactive heuristics are left out of the result.
    """
    assert color in [Piece.BLACK, Piece.WHITE]

    opponent = color.opponent()
    own_discs = board.count(color)
    opponent_discs = board.count(opponent)
    terms: dict[str, float] = {}

    if is_active(board, DISC_DIFFERENCE):
        terms[DISC_DIFFERENCE] = (own_discs - opponent_discs) * 64

    if is_active(board, MOBILITY):
        mobility = count_mobility(board, color) - count_mobility(board, opponent)
        terms[MOBILITY] = mobility / board.empty_count()

    if is_active(board, CORNER_CONTROL):
        corner_control = count_corners(board, color) - count_corners(board, opponent)
        terms[CORNER_CONTROL] = corner_control / 4

    if is_active(board, STABILITY):
        # Normalized by own disc count only, so this is not antisymmetric.
        if own_discs == 0:
            terms[STABILITY] = 0.0
        else:
            stability = calculate_stability(board, color) - calculate_stability(
                board, opponent
            )
            terms[STABILITY] = stability / own_discs

    if is_active(board, PARITY):
        terms[PARITY] = calculate_parity(board)

    if is_active(board, SQUARE_WEIGHTS):
        weights = calculate_square_weights(board, color)
        terms[SQUARE_WEIGHTS] = weights / (25 * board.size)

    return terms


def evaluate_board(board: Board, color: Piece) -> float:
    return float(sum(heuristic_terms(board, color).values()))
