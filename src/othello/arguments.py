from __future__ import annotations

from othello.engine.search import DEFAULT_SEARCH_DEPTH

MIN_BOARD_SIZE = 4
MAX_BOARD_SIZE = 10
DEFAULT_BOARD_SIZE = 8


def is_valid_board_size(size: int) -> bool:
    return MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE


def clamp_board_size(size: int) -> int:
    return max(MIN_BOARD_SIZE, min(size, MAX_BOARD_SIZE))


class PlayerSettings:
    def __init__(
        self,
        show_helpers: bool,
        test_mode: bool,
        search_depth: int = DEFAULT_SEARCH_DEPTH,
        random_moves: bool = False,
    ) -> None:
        self.show_helpers = show_helpers
        self.test_mode = test_mode
        self.search_depth = search_depth
        self.random_moves = random_moves


class Settings:
    def __init__(
        self,
        board_size: int,
        autoplay: bool,
        use_defaults: bool,
        show_helpers: bool,
        show_log: bool,
        test_mode: bool,
        search_depth: int = DEFAULT_SEARCH_DEPTH,
        random_moves: bool = False,
    ) -> None:
        self.board_size = board_size
        self.autoplay = autoplay
        self.use_defaults = use_defaults
        self.show_helpers = show_helpers
        self.show_log = show_log
        self.test_mode = test_mode
        self.search_depth = search_depth
        self.random_moves = random_moves

    @classmethod
    def default(cls) -> Settings:
        return Settings(
            DEFAULT_BOARD_SIZE,
            autoplay=False,
            use_defaults=True,
            show_helpers=True,
            show_log=False,
            test_mode=False,
        )

    def to_player_settings(self) -> PlayerSettings:
        return PlayerSettings(
            self.show_helpers,
            self.test_mode,
            search_depth=self.search_depth,
            random_moves=self.random_moves,
        )
