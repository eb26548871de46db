from __future__ import annotations

import typer
from typing import Iterable

from othello.engine.board import Board
from othello.engine.move import Move
from othello.engine.piece import Piece

PIECE_COLORS = {
    Piece.BLACK: typer.colors.MAGENTA,
    Piece.WHITE: typer.colors.CYAN,
    Piece.EMPTY: typer.colors.WHITE,
}


def split_leading_whitespace(message: str) -> tuple[str, str]:
    text = message.lstrip()
    return message[: len(message) - len(text)], text


def error(message: str) -> None:
    indent, text = split_leading_whitespace(message)
    typer.secho(f"{indent}Error: {text}", fg=typer.colors.RED)


def warn(message: str) -> None:
    indent, text = split_leading_whitespace(message)
    typer.secho(f"{indent}Warning: {text}", fg=typer.colors.YELLOW)


def info(message: str, color: str = typer.colors.GREEN) -> None:
    typer.secho(message, fg=color)


def piece_name(piece: Piece) -> str:
    return typer.style(piece.display_name(), fg=PIECE_COLORS[piece])


def piece_char(piece: Piece) -> str:
    return typer.style(piece.board_char(), fg=PIECE_COLORS[piece])


def _grid_text(size: int, cells: list[str]) -> str:
    indices = range(size)
    text = " " + "".join(f" {i}" for i in indices)
    for y in indices:
        text += f"\n{y}"
        for x in indices:
            text += f" {cells[y * size + x]}"
    return text


def board_text(board: Board) -> str:
    return _grid_text(board.size, [piece_char(cell) for cell in board.cells])


def possible_moves_text(board: Board, moves: Iterable[Move]) -> str:
    moves = list(moves)
    cells = [piece_char(cell) for cell in board.cells]
    lines = [typer.style(f"  Possible moves ({len(moves)}):", fg=typer.colors.YELLOW)]

    for move in moves:
        lines.append(f"  {move}")
        x, y = move.square
        cells[y * board.size + x] = typer.style(str(move.value), fg=typer.colors.YELLOW)

    grid = _grid_text(board.size, cells)
    lines.extend("  " + line for line in grid.split("\n"))
    return "\n".join(lines)


def score_text(board: Board) -> str:
    black, white = board.player_scores()
    black_text = typer.style(str(black), fg=PIECE_COLORS[Piece.BLACK])
    white_text = typer.style(str(white), fg=PIECE_COLORS[Piece.WHITE])
    return f"Score: {black_text} | {white_text}"
