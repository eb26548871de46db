import pytest

from othello.arguments import (
    DEFAULT_BOARD_SIZE,
    Settings,
    clamp_board_size,
    is_valid_board_size,
)
from othello.config import (
    get_computer_delay,
    get_move_delay,
    get_search_depth,
    get_verbose,
)


@pytest.mark.parametrize(
    ["size", "valid", "clamped"],
    [
        pytest.param(3, False, 4, id="too-small"),
        pytest.param(4, True, 4, id="min"),
        pytest.param(8, True, 8, id="default"),
        pytest.param(10, True, 10, id="max"),
        pytest.param(12, False, 10, id="too-big"),
    ],
)
def test_board_size(size: int, valid: bool, clamped: int) -> None:
    assert is_valid_board_size(size) == valid
    assert clamp_board_size(size) == clamped


def test_settings_to_player_settings() -> None:
    settings = Settings(
        6,
        autoplay=True,
        use_defaults=False,
        show_helpers=False,
        show_log=True,
        test_mode=True,
        search_depth=3,
        random_moves=True,
    )
    player_settings = settings.to_player_settings()

    assert not player_settings.show_helpers
    assert player_settings.test_mode
    assert player_settings.search_depth == 3
    assert player_settings.random_moves


def test_default_settings() -> None:
    settings = Settings.default()
    assert settings.board_size == DEFAULT_BOARD_SIZE
    assert settings.use_defaults
    assert not settings.autoplay


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in [
        "OTHELLO_SEARCH_DEPTH",
        "OTHELLO_MOVE_DELAY",
        "OTHELLO_COMPUTER_DELAY",
        "OTHELLO_VERBOSE",
    ]:
        monkeypatch.delenv(name, raising=False)

    assert get_search_depth() == 5
    assert get_move_delay() == 1.0
    assert get_computer_delay() == (1.0, 2.0)
    assert not get_verbose()


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OTHELLO_SEARCH_DEPTH", "3")
    monkeypatch.setenv("OTHELLO_MOVE_DELAY", "0")
    monkeypatch.setenv("OTHELLO_COMPUTER_DELAY", "0.5,0.75")
    monkeypatch.setenv("OTHELLO_VERBOSE", "1")

    assert get_search_depth() == 3
    assert get_move_delay() == 0.0
    assert get_computer_delay() == (0.5, 0.75)
    assert get_verbose()


@pytest.mark.parametrize(
    ["name", "value"],
    [
        pytest.param("OTHELLO_SEARCH_DEPTH", "0", id="depth-zero"),
        pytest.param("OTHELLO_SEARCH_DEPTH", "deep", id="depth-not-a-number"),
        pytest.param("OTHELLO_MOVE_DELAY", "-1", id="negative-delay"),
        pytest.param("OTHELLO_COMPUTER_DELAY", "1", id="delay-one-part"),
        pytest.param("OTHELLO_COMPUTER_DELAY", "2,1", id="delay-reversed"),
    ],
)
def test_config_invalid(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError):
        if name == "OTHELLO_SEARCH_DEPTH":
            get_search_depth()
        elif name == "OTHELLO_MOVE_DELAY":
            get_move_delay()
        else:
            get_computer_delay()
