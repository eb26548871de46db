from __future__ import annotations

from typing import Iterator


class Step:
    """Unit direction on the board."""

    def __init__(self, x: int, y: int) -> None:
        if x not in (-1, 0, 1) or y not in (-1, 0, 1) or (x, y) == (0, 0):
            raise ValueError(f"Invalid step direction [{x},{y}]")

        self.__x = x
        self.__y = y

    @property
    def x(self) -> int:
        return self.__x

    @property
    def y(self) -> int:
        return self.__y

    def as_tuple(self) -> tuple[int, int]:
        return (self.__x, self.__y)

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())

    def __repr__(self) -> str:
        return f"Step({self.__x}, {self.__y})"

    def __str__(self) -> str:
        return f"[{self.__x},{self.__y}]"

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Step):
            raise TypeError(f"Cannot compare Step with {type(other)}")

        return self.as_tuple() == other.as_tuple()


class Square:
    """Board coordinate. Squares sort by x first, then by y."""

    def __init__(self, x: int, y: int) -> None:
        self.__x = x
        self.__y = y

    @property
    def x(self) -> int:
        return self.__x

    @property
    def y(self) -> int:
        return self.__y

    def as_tuple(self) -> tuple[int, int]:
        return (self.__x, self.__y)

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())

    def __add__(self, step: Step) -> Square:
        return Square(self.__x + step.x, self.__y + step.y)

    def __repr__(self) -> str:
        return f"Square({self.__x}, {self.__y})"

    def __str__(self) -> str:
        return f"({self.__x},{self.__y})"

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Square):
            raise TypeError(f"Cannot compare Square with {type(other)}")

        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other: Square) -> bool:
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: Square) -> bool:
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: Square) -> bool:
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: Square) -> bool:
        return self.as_tuple() >= other.as_tuple()


STEP_DIRECTIONS = [
    Step(-1, -1),
    Step(-1, 0),
    Step(-1, 1),
    Step(0, -1),
    Step(0, 1),
    Step(1, -1),
    Step(1, 0),
    Step(1, 1),
]
