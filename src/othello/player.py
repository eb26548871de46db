from __future__ import annotations

import random
import time
import typer
from typing import Callable, Optional

from othello import console
from othello.arguments import PlayerSettings
from othello.config import get_computer_delay, get_move_delay, get_verbose
from othello.engine.board import Board
from othello.engine.geometry import Square
from othello.engine.move import Move
from othello.engine.piece import Piece
from othello.engine.search import AlphaBetaSearch


def parse_square(text: str) -> Square:
    """Parse user input of the form `x,y` with single digit coordinates."""
    text = text.strip()

    if len(text) != 3 or text[1] != ",":
        raise ValueError(f'Invalid coordinates "{text}"')

    if not (text[0].isdigit() and text[2].isdigit()):
        raise ValueError(f'Invalid coordinates "{text}"')

    return Square(int(text[0]), int(text[2]))


class Player:
    def __init__(
        self,
        color: Piece,
        settings: PlayerSettings,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        assert color in [Piece.BLACK, Piece.WHITE]

        self.color = color
        self.settings = settings
        self.rng = rng or random.Random()
        self.sleep = sleep
        self.can_play = True
        self.is_human = True
        self.rounds_played = 0

    @classmethod
    def black(
        cls,
        settings: PlayerSettings,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> Player:
        return cls(Piece.BLACK, settings, rng, sleep)

    @classmethod
    def white(
        cls,
        settings: PlayerSettings,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> Player:
        return cls(Piece.WHITE, settings, rng, sleep)

    def play_one_move(self, board: Board) -> Optional[str]:
        """
        Let this player make one move on `board`.

        Returns the log entry of the applied move, or None if the player had
        to pass.
        """
        typer.echo(f"Turn: {console.piece_name(self.color)}")
        moves = board.possible_moves(self.color)

        if not moves:
            self.can_play = False
            console.info("  No moves available...", typer.colors.YELLOW)
            return None

        self.can_play = True

        if self.is_human and self.settings.show_helpers:
            typer.echo(console.possible_moves_text(board, moves))

        if self.is_human:
            move = self.get_human_move(moves)
        else:
            move = self.get_computer_move(board, moves)

        board.place_piece(move)
        typer.echo(f"\n{console.board_text(board)}")
        typer.echo(console.score_text(board))
        self.rounds_played += 1

        if not self.settings.test_mode:
            self.sleep(get_move_delay())

        return move.to_log_entry()

    def get_computer_move(self, board: Board, moves: list[Move]) -> Move:
        typer.echo("  Computer plays...")

        if self.settings.test_mode:
            move = moves[0]
        elif self.settings.random_moves:
            self.sleep(self.rng.uniform(*get_computer_delay()))
            move = self.rng.choice(moves)
        else:
            search = AlphaBetaSearch(self.color, self.settings.search_depth)
            move = search.choose_move(board)

            if get_verbose():
                typer.echo(
                    f"  Searched {search.nodes} positions, best score {search.best_score:.3f}"
                )

        typer.echo(f"  {move.square} -> {move.value}")
        return move

    def get_human_move(self, moves: list[Move]) -> Move:
        while True:
            square = self.get_square()

            for move in moves:
                if move.square == square:
                    return move

            console.error(
                f"  Can't place a {console.piece_name(self.color)} disk in square {square}!"
            )

    def get_square(self) -> Square:
        while True:
            text = typer.prompt("  Give disk position (x,y)")

            try:
                return parse_square(text)
            except ValueError:
                console.error("  Give coordinates in the form 'x,y'")

    def set_human(self, is_human: bool) -> None:
        self.is_human = is_human

    def reset(self) -> None:
        self.can_play = True
        self.rounds_played = 0

    def type_string(self) -> str:
        return "Human   " if self.is_human else "Computer"

    def __str__(self) -> str:
        return (
            f"{console.piece_name(self.color)} | {self.type_string()} "
            f"| Moves: {self.rounds_played}"
        )
