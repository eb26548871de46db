import os
import typer
from typing import Optional

from othello import __version__, console
from othello.arguments import (
    DEFAULT_BOARD_SIZE,
    MAX_BOARD_SIZE,
    MIN_BOARD_SIZE,
    Settings,
    clamp_board_size,
    is_valid_board_size,
)
from othello.config import get_search_depth
from othello.engine.piece import Piece
from othello.game import Game

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from othello.window import Window  # noqa:E402


def ask_board_size() -> int:
    answer: str = typer.prompt(
        f"Choose board size (default is {DEFAULT_BOARD_SIZE})",
        default="",
        show_default=False,
    )

    try:
        size = int(answer)
    except ValueError:
        console.warn(f"Invalid size, defaulting to {DEFAULT_BOARD_SIZE}...")
        return DEFAULT_BOARD_SIZE

    if not is_valid_board_size(size):
        console.warn(
            f"Limiting board size to valid range {MIN_BOARD_SIZE}...{MAX_BOARD_SIZE}"
        )
    return clamp_board_size(size)


def play_command(
    size: Optional[int] = typer.Argument(None, help="Optional board size"),
    autoplay: bool = typer.Option(
        False, "--autoplay", "-a", help="Enable autoplay mode"
    ),
    use_defaults: bool = typer.Option(
        False, "--default", "-d", help="Play with default settings"
    ),
    show_log: bool = typer.Option(False, "--log", "-l", help="Show log after a game"),
    hide_helpers: bool = typer.Option(
        False, "--no-helpers", "-n", help="Hide disk placement hints"
    ),
    test_mode: bool = typer.Option(False, "--test", "-t", help="Enable test mode"),
    random_moves: bool = typer.Option(
        False, "--random", "-r", help="Computer plays random moves instead of searching"
    ),
    depth: Optional[int] = typer.Option(
        None, "--depth", min=1, help="Computer search depth"
    ),
    version: bool = typer.Option(False, "-v", help="Print version and exit"),
) -> None:
    """A simple Othello CLI game implementation"""
    if version:
        typer.echo(f"othello {__version__}")
        raise typer.Exit()

    console.info("OTHELLO GAME - PYTHON")

    if size is not None:
        if not is_valid_board_size(size):
            console.error(f"Unsupported board size: {size}")
            raise typer.Exit(code=1)
        board_size = size
        typer.echo(f"Using board size: {board_size}")
    elif autoplay or use_defaults:
        board_size = DEFAULT_BOARD_SIZE
    else:
        board_size = ask_board_size()

    settings = Settings(
        board_size,
        autoplay,
        use_defaults,
        show_helpers=not hide_helpers,
        show_log=show_log,
        test_mode=test_mode,
        search_depth=depth if depth is not None else get_search_depth(),
        random_moves=random_moves,
    )

    try:
        Game(settings).play()
    except (KeyboardInterrupt, typer.Abort):
        typer.echo("\ncancelled...")
        raise typer.Exit(code=1)


def gui_command(
    size: int = typer.Argument(DEFAULT_BOARD_SIZE, help="Board size"),
    white: bool = typer.Option(False, "--white", "-w", help="Play as white"),
    depth: Optional[int] = typer.Option(
        None, "--depth", min=1, help="Computer search depth"
    ),
) -> None:
    """Play against the computer in a window"""
    if not is_valid_board_size(size):
        console.error(f"Unsupported board size: {size}")
        raise typer.Exit(code=1)

    human_color = Piece.WHITE if white else Piece.BLACK
    search_depth = depth if depth is not None else get_search_depth()
    Window(size, human_color, search_depth).run()


def play() -> None:
    typer.run(play_command)


def gui() -> None:
    typer.run(gui_command)
