from __future__ import annotations

import random
import time
import typer
from typing import Callable, Optional

from othello import console
from othello.arguments import Settings
from othello.engine.board import Board
from othello.engine.piece import Piece
from othello.player import Player


def get_answer(question: str, yes: str = "y", no: str = "n") -> bool:
    answer: str = typer.prompt(f"{question} ({yes}/{no})?", default="", show_default=False)
    return answer.strip().lower() == yes.lower()


class Game:
    """Runs console games between two players, human or computer."""

    def __init__(
        self,
        settings: Settings,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.settings = settings
        self.board = Board(settings.board_size)
        self.black = Player.black(settings.to_player_settings(), rng, sleep)
        self.white = Player.white(settings.to_player_settings(), rng, sleep)
        self.rounds_played = 0
        self.games_played = 0
        self.log: list[str] = []

    def play(self) -> None:
        while True:
            self.init_game()
            self.game_loop()
            self.print_result()

            if self.settings.show_log:
                self.print_log()

            if self.settings.autoplay or not get_answer("Would you like to play again"):
                break

    def init_game(self) -> None:
        if self.games_played > 0:
            self.board = Board(self.settings.board_size)
            self.black.reset()
            self.white.reset()
            self.rounds_played = 0
            self.log.clear()

        if self.settings.autoplay:
            self.black.set_human(False)
            self.white.set_human(False)
        elif self.settings.use_defaults:
            self.white.set_human(False)
        elif get_answer("Would you like to play against the computer"):
            if get_answer("Would you like to play as black or white", "b", "w"):
                self.white.set_human(False)
            else:
                self.black.set_human(False)

        console.info("\nPlayers:", typer.colors.BRIGHT_BLACK)
        self.print_status()

    def game_loop(self) -> None:
        # Stop on a full board, or after a round in which nobody could move.
        while self.board.can_play() and (self.black.can_play or self.white.can_play):
            self.rounds_played += 1
            typer.echo(f"\n=========== ROUND: {self.rounds_played} ===========")

            for player in [self.black, self.white]:
                result = player.play_one_move(self.board)
                if result is not None:
                    self.log.append(f"{result};{self.board.to_log_entry()}")
                typer.echo("--------------------------------")

        self.games_played += 1

    def winner(self) -> Piece:
        return self.board.result()

    def print_result(self) -> None:
        typer.echo("\n================================")
        console.info("The game is finished!")
        console.info("Result:", typer.colors.BRIGHT_BLACK)
        self.print_status()
        typer.echo("")

        winner = self.winner()
        if winner == Piece.EMPTY:
            typer.echo("The game ended in a tie...\n")
        else:
            typer.echo(f"The winner is {console.piece_name(winner)}!\n")

    def print_status(self) -> None:
        typer.echo(str(self.black))
        typer.echo(str(self.white))
        typer.echo(f"\n{console.board_text(self.board)}")

    def print_log(self) -> None:
        console.info("Game log:", typer.colors.YELLOW)
        for index, line in enumerate(self.log, start=1):
            typer.echo(f"{index:02}: {line}")
