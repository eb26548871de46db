from __future__ import annotations

from math import inf

from othello.engine.board import Board
from othello.engine.evaluation import evaluate_board
from othello.engine.move import Move
from othello.engine.piece import Piece

DEFAULT_SEARCH_DEPTH = 5


class AlphaBetaSearch:
    """
    Depth limited minimax with alpha-beta pruning.

    Every explored position is a clone of its parent, the board passed to
    `choose_move()` is never modified.

    Leaves are evaluated from the point of view of the side to move at that
    ply: the own color on maximizing plies, the opponent on minimizing plies.
    """

    def __init__(self, color: Piece, max_depth: int = DEFAULT_SEARCH_DEPTH) -> None:
        assert color in [Piece.BLACK, Piece.WHITE]

        self.color = color
        self.max_depth = max_depth
        self.nodes = 0
        self.best_score = -inf

    def choose_move(self, board: Board, deterministic: bool = False) -> Move:
        moves = board.possible_moves(self.color)

        if not moves:
            raise ValueError(f"{self.color.name} has no legal moves")

        self.nodes = 0
        self.best_score = -inf

        if deterministic:
            return moves[0]

        best_move = moves[0]
        alpha = -inf
        beta = inf

        for move in moves:
            child = board.clone()
            child.place_piece(move)
            score = self.minimax(child, self.max_depth - 1, alpha, beta, False)

            # Strictly better only, earlier moves win ties.
            if score > self.best_score:
                self.best_score = score
                best_move = move

            alpha = max(alpha, score)

        return best_move

    def minimax(
        self, board: Board, depth: int, alpha: float, beta: float, maximizing: bool
    ) -> float:
        self.nodes += 1
        color = self.color if maximizing else self.color.opponent()

        # A full board must not reach move generation or the mobility term.
        if depth <= 0 or not board.can_play():
            return evaluate_board(board, color)

        moves = board.possible_moves(color)

        # A side without moves ends the line, passes are not searched.
        if not moves:
            return evaluate_board(board, color)

        if maximizing:
            best = -inf
            for move in moves:
                child = board.clone()
                child.place_piece(move)
                best = max(best, self.minimax(child, depth - 1, alpha, beta, False))
                alpha = max(alpha, best)
                if beta <= alpha:
                    break
            return best

        best = inf
        for move in moves:
            child = board.clone()
            child.place_piece(move)
            best = min(best, self.minimax(child, depth - 1, alpha, beta, True))
            beta = min(beta, best)
            if beta <= alpha:
                break
        return best


def choose_move(
    board: Board,
    color: Piece,
    depth: int = DEFAULT_SEARCH_DEPTH,
    deterministic: bool = False,
) -> Move:
    return AlphaBetaSearch(color, depth).choose_move(board, deterministic)
