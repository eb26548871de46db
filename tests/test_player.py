import pytest
import random
import typer
from typing import Any, Iterator

from othello.arguments import PlayerSettings
from othello.engine.board import Board
from othello.engine.geometry import Square
from othello.engine.piece import BLACK, WHITE
from othello.player import Player, parse_square

WHITE_MUST_PASS = "__BB" "___W" "____" "____"


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def fake_prompt(answers: list[str]) -> Any:
    remaining: Iterator[str] = iter(answers)

    def prompt(*args: Any, **kwargs: Any) -> str:
        return next(remaining)

    return prompt


@pytest.mark.parametrize(
    ["text", "expected"],
    [
        pytest.param("1,3", Square(1, 3), id="plain"),
        pytest.param(" 0,9 ", Square(0, 9), id="whitespace"),
    ],
)
def test_parse_square_ok(text: str, expected: Square) -> None:
    assert parse_square(text) == expected


@pytest.mark.parametrize(
    ["text"],
    [
        pytest.param("", id="empty"),
        pytest.param("13", id="no-comma"),
        pytest.param("1;3", id="wrong-separator"),
        pytest.param("a,b", id="letters"),
        pytest.param("10,3", id="too-long"),
    ],
)
def test_parse_square_error(text: str) -> None:
    with pytest.raises(ValueError):
        parse_square(text)


def test_computer_test_mode_plays_first_move() -> None:
    sleep = SleepRecorder()
    player = Player.black(PlayerSettings(show_helpers=True, test_mode=True), sleep=sleep)
    player.set_human(False)
    board = Board(4)

    entry = player.play_one_move(board)

    assert entry == "B:(0,1),1"
    assert board.get_square(Square(0, 1)) == BLACK
    assert player.rounds_played == 1
    assert player.can_play
    assert sleep.calls == []


def test_pass_when_no_moves() -> None:
    player = Player.white(PlayerSettings(show_helpers=True, test_mode=True))
    board = Board.from_log_entry(WHITE_MUST_PASS)

    assert player.play_one_move(board) is None
    assert not player.can_play
    assert board.to_log_entry() == WHITE_MUST_PASS


def test_computer_random_moves(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OTHELLO_COMPUTER_DELAY", "1.0,2.0")
    monkeypatch.setenv("OTHELLO_MOVE_DELAY", "0.5")

    sleep = SleepRecorder()
    settings = PlayerSettings(show_helpers=False, test_mode=False, random_moves=True)
    player = Player.black(settings, rng=random.Random(3), sleep=sleep)
    player.set_human(False)
    board = Board(8)
    legal = {move.square for move in board.possible_moves(BLACK)}

    entry = player.play_one_move(board)

    assert entry is not None
    played = [square for square in legal if board.get_square(square) == BLACK]
    assert len(played) == 1

    assert len(sleep.calls) == 2
    assert 1.0 <= sleep.calls[0] <= 2.0
    assert sleep.calls[1] == 0.5


def test_computer_search(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OTHELLO_MOVE_DELAY", "0")
    monkeypatch.setenv("OTHELLO_VERBOSE", "1")

    sleep = SleepRecorder()
    settings = PlayerSettings(show_helpers=False, test_mode=False, search_depth=2)
    player = Player.white(settings, sleep=sleep)
    player.set_human(False)
    board = Board(6)
    before = board.count(WHITE)

    entry = player.play_one_move(board)

    assert entry is not None
    assert entry.startswith("W:")
    assert board.count(WHITE) == before + 2
    assert sleep.calls == [0.0]


def test_human_move(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(typer, "prompt", fake_prompt(["bad", "0,0", "2,3"]))

    player = Player.black(PlayerSettings(show_helpers=True, test_mode=True))
    board = Board(4)

    entry = player.play_one_move(board)

    assert entry == "B:(2,3),1"
    assert board.get_square(Square(2, 3)) == BLACK
    assert board.get_square(Square(2, 2)) == BLACK


def test_reset_and_str() -> None:
    player = Player.black(PlayerSettings(show_helpers=False, test_mode=True))
    player.set_human(False)
    player.play_one_move(Board(4))
    player.can_play = False

    assert "Computer" in str(player)
    assert "Moves: 1" in str(player)

    player.reset()
    assert player.can_play
    assert player.rounds_played == 0

    player.set_human(True)
    assert "Human" in str(player)
