from __future__ import annotations

import pygame
from pygame.event import Event
from typing import Any

from othello.engine.board import Board
from othello.engine.geometry import Square
from othello.engine.piece import Piece
from othello.engine.search import AlphaBetaSearch


def is_game_end(board: Board) -> bool:
    return not (board.possible_moves(Piece.BLACK) or board.possible_moves(Piece.WHITE))


def next_turn(board: Board, mover: Piece) -> Piece:
    opponent = mover.opponent()

    if board.possible_moves(opponent):
        return opponent

    # Opponent has to pass.
    if board.possible_moves(mover):
        return mover

    return opponent


class GameMode:
    """Human against computer, one board per played move so moves can be undone."""

    def __init__(
        self,
        size: int,
        human_color: Piece,
        depth: int,
        deterministic: bool = False,
    ) -> None:
        assert human_color in [Piece.BLACK, Piece.WHITE]

        self.size = size
        self.human_color = human_color
        self.search = AlphaBetaSearch(human_color.opponent(), depth)
        self.deterministic = deterministic
        self.history: list[tuple[Board, Piece]] = []
        self.restart()

    def restart(self) -> None:
        self.history = [(Board(self.size), Piece.BLACK)]

    def get_board(self) -> Board:
        return self.history[-1][0]

    def get_turn(self) -> Piece:
        return self.history[-1][1]

    def is_human_turn(self) -> bool:
        return self.get_turn() == self.human_color

    def play(self, square: Square) -> bool:
        board = self.get_board()
        turn = self.get_turn()

        for move in board.possible_moves(turn):
            if move.square == square:
                child = board.clone()
                child.place_piece(move)
                self.history.append((child, next_turn(child, turn)))
                return True

        return False

    def on_event(self, event: Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_RIGHT:
                self.undo()

    def on_move(self, square: Square) -> None:
        if is_game_end(self.get_board()):
            self.restart()
            return

        if not self.is_human_turn():
            return

        self.play(square)

    def on_frame(self) -> None:
        board = self.get_board()

        if self.is_human_turn() or is_game_end(board):
            return

        move = self.search.choose_move(board, self.deterministic)
        self.play(move.square)

    def undo(self) -> None:
        # Go back to the previous position where the human was to move.
        while len(self.history) > 1:
            self.history.pop()
            if self.is_human_turn():
                break

    def get_ui_details(self) -> dict[str, Any]:
        board = self.get_board()
        black, white = board.player_scores()
        details: dict[str, Any] = {
            "score": (black, white),
            "game_end": is_game_end(board),
        }

        if self.is_human_turn():
            details["valid_moves"] = {
                move.square for move in board.possible_moves(self.human_color)
            }

        return details
