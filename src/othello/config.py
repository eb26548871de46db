import os
from dotenv import load_dotenv

from othello.engine.search import DEFAULT_SEARCH_DEPTH

load_dotenv()


def get_search_depth() -> int:
    depth = int(os.getenv("OTHELLO_SEARCH_DEPTH", str(DEFAULT_SEARCH_DEPTH)))

    if depth < 1:
        raise ValueError(f"OTHELLO_SEARCH_DEPTH must be at least 1, got {depth}")

    return depth


def get_move_delay() -> float:
    delay = float(os.getenv("OTHELLO_MOVE_DELAY", "1.0"))

    if delay < 0:
        raise ValueError(f"OTHELLO_MOVE_DELAY must not be negative, got {delay}")

    return delay


def get_computer_delay() -> tuple[float, float]:
    raw = os.getenv("OTHELLO_COMPUTER_DELAY", "1.0,2.0")
    parts = raw.split(",")

    if len(parts) != 2:
        raise ValueError(f'OTHELLO_COMPUTER_DELAY must look like "min,max", got "{raw}"')

    low, high = float(parts[0]), float(parts[1])

    if not (0 <= low <= high):
        raise ValueError(f'Invalid OTHELLO_COMPUTER_DELAY range "{raw}"')

    return low, high


def get_verbose() -> bool:
    return os.getenv("OTHELLO_VERBOSE", "0") != "0"
