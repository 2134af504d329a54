"""Common type aliases and enumerations.

``Point`` and ``Rect`` are the pixel-space types shared by the coordinate
mapper, arrow geometry and the renderer. Pixel values are floats; rounding
to integer pixels happens only when drawing.
"""

from enum import StrEnum, auto
from typing import Sequence, Tuple


Point = Tuple[float, float]
Rect = Tuple[float, float, float, float]  # x, y, width, height
Padding = Tuple[int, int, int, int]  # top, right, bottom, left
Grid = Sequence[Sequence[str]]


class Color(StrEnum):
    """Side a piece belongs to."""

    WHITE = auto()
    BLACK = auto()


class PieceKind(StrEnum):
    """Piece kinds, valued by their lowercase algebraic letter."""

    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"


class PositionStatus(StrEnum):
    """Render-readiness of a position. Only ``LOADED`` may be rendered."""

    EMPTY = auto()
    LOADED = auto()
