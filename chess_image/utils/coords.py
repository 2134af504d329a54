"""Square <-> grid cell <-> pixel mapping.

Rendering rows ``i`` and columns ``j`` run 0..7 in drawing order. Column
``j`` is always painted at horizontal slot ``7 - j``; the flip flag only
changes which file and rank are looked up for a cell:

* rank number: ``8 - i`` unflipped, ``i + 1`` flipped;
* file: ``FILES[7 - j]`` unflipped, ``FILES[j]`` flipped.

Squares outside the board are not validated here.
"""

from typing import Tuple

from chess_image.square import Square
from chess_image.types import Padding, Point, Rect


def rank_number(i: int, flipped: bool) -> int:
    """1-based rank shown on rendering row ``i``."""
    return i + 1 if flipped else 8 - i


def board_column(j: int, flipped: bool) -> int:
    """Index into ``FILES`` for rendering column ``j``."""
    return j if flipped else 7 - j


def cell_to_square(i: int, j: int, flipped: bool) -> Square:
    return Square(board_column(j, flipped), rank_number(i, flipped) - 1)


def square_to_cell(square: Square, flipped: bool) -> Tuple[int, int]:
    """Inverse of :func:`cell_to_square`."""
    if flipped:
        return square.rank, square.file
    return 7 - square.rank, 7 - square.file


def is_dark_cell(i: int, j: int) -> bool:
    return (i + j) % 2 == 0


def cell_rect(i: int, j: int, size: int, left: float = 0, top: float = 0) -> Rect:
    """Pixel rectangle (x, y, w, h) of cell ``(i, j)``, offset by padding."""
    sq = size / 8
    x = sq * (7 - j + 1) - sq + left
    y = sq * i + top
    return x, y, sq, sq


def square_center(
    square: Square, size: int, flipped: bool, left: float = 0, top: float = 0
) -> Point:
    """Pixel centre of ``square``, used for arrow endpoints."""
    sq = size / 8
    row = square.rank + 1 if flipped else 8 - square.rank
    col = 8 - board_column(square.file, flipped)

    def rc2xy(a: int) -> float:
        return a * sq - sq / 2

    return rc2xy(col) + left, rc2xy(row) + top


def canvas_size(size: int, padding: Padding) -> Tuple[int, int]:
    """(width, height) of the full image including padding."""
    top, right, bottom, left = padding
    return size + left + right, size + top + bottom
