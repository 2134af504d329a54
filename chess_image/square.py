"""Algebraic square value type.

Placed in its own module because the mapper, the position model and the
rules engine adapter all need it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

FILES = "abcdefgh"
BOARD_DIMENSION = 8


@dataclass(frozen=True)
class Square:
    """Board location.

    Attributes:
        file: File index, 0 for ``a`` through 7 for ``h``.
        rank: Rank index, 0 for rank 1 through 7 for rank 8.
    """

    file: int
    rank: int

    @classmethod
    def from_algebraic(cls, name: str) -> Square:
        """Parse ``'a1'`` .. ``'h8'``; raises ``ValueError`` otherwise."""
        text = name.strip().lower()
        if len(text) != 2 or text[0] not in FILES or text[1] not in "12345678":
            raise ValueError(f"Not an algebraic square: {name!r}")
        return cls(FILES.index(text[0]), int(text[1]) - 1)

    def to_algebraic(self) -> str:
        return f"{FILES[self.file]}{self.rank + 1}"

    def __str__(self) -> str:
        return self.to_algebraic()


SQUARES: Tuple[Square, ...] = tuple(
    Square(file, rank)
    for rank in range(BOARD_DIMENSION)
    for file in range(BOARD_DIMENSION)
)


def as_square(value: Square | str) -> Square:
    """Accept either a ``Square`` or its algebraic name."""
    if isinstance(value, Square):
        return value
    return Square.from_algebraic(value)
