import pytest
import re
from typing import Iterator

from othello import game as game_module
from othello.arguments import Settings
from othello.engine.piece import BLACK, EMPTY, WHITE
from othello.game import Game


def autoplay_settings(size: int, show_log: bool = False) -> Settings:
    return Settings(
        size,
        autoplay=True,
        use_defaults=False,
        show_helpers=True,
        show_log=show_log,
        test_mode=True,
    )


@pytest.mark.parametrize("size", [4, 6, 8])
def test_autoplay_game(size: int) -> None:
    game = Game(autoplay_settings(size))
    game.play()

    assert game.games_played == 1
    assert not game.black.is_human
    assert not game.white.is_human

    # Every logged move adds exactly one disc.
    assert len(game.log) == game.board.disc_count() - 4
    assert game.black.rounds_played + game.white.rounds_played == len(game.log)
    assert game.winner() in [BLACK, WHITE, EMPTY]

    pattern = re.compile(r"^[BW]:\(\d,\d\),\d+;[BW_]+$")
    for line in game.log:
        assert pattern.match(line)
        assert len(line.split(";")[1]) == size * size


def test_log_ends_with_final_board() -> None:
    game = Game(autoplay_settings(4))
    game.play()

    assert game.log[-1].endswith(f";{game.board.to_log_entry()}")


def test_print_log(capsys: pytest.CaptureFixture[str]) -> None:
    game = Game(autoplay_settings(4, show_log=True))
    game.play()

    output = capsys.readouterr().out
    assert "The game is finished!" in output
    assert "Game log:" in output
    assert f"01: {game.log[0]}" in output


def test_init_game_questions(monkeypatch: pytest.MonkeyPatch) -> None:
    answers: Iterator[bool] = iter([True, False])
    monkeypatch.setattr(game_module, "get_answer", lambda *args: next(answers))

    settings = Settings(
        4,
        autoplay=False,
        use_defaults=False,
        show_helpers=True,
        show_log=False,
        test_mode=True,
    )
    game = Game(settings)
    game.init_game()

    assert not game.black.is_human
    assert game.white.is_human


def test_init_game_defaults() -> None:
    game = Game(Settings.default())
    game.init_game()

    assert game.black.is_human
    assert not game.white.is_human


def test_second_game_resets_state() -> None:
    game = Game(autoplay_settings(4))
    game.init_game()
    game.game_loop()
    first_log = list(game.log)

    game.init_game()

    assert game.games_played == 1
    assert game.rounds_played == 0
    assert game.log == []
    assert game.board.disc_count() == 4
    assert game.black.rounds_played == 0

    game.game_loop()
    assert game.games_played == 2
    assert game.log == first_log


@pytest.mark.parametrize(
    ["answer", "expected"],
    [
        pytest.param("y", True, id="yes"),
        pytest.param(" Y ", True, id="yes-upper"),
        pytest.param("n", False, id="no"),
        pytest.param("", False, id="empty"),
    ],
)
def test_get_answer(monkeypatch: pytest.MonkeyPatch, answer: str, expected: bool) -> None:
    monkeypatch.setattr(game_module.typer, "prompt", lambda *args, **kwargs: answer)
    assert game_module.get_answer("Continue") == expected
