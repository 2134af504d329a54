import pytest

from chess_image.config import RenderConfig
from chess_image.square import SQUARES, Square
from chess_image.utils.coords import (
    canvas_size,
    cell_rect,
    cell_to_square,
    is_dark_cell,
    square_center,
    square_to_cell,
)


@pytest.mark.parametrize("flipped", [False, True])
def test_square_cell_round_trip(flipped: bool) -> None:
    for square in SQUARES:
        i, j = square_to_cell(square, flipped)
        assert 0 <= i < 8 and 0 <= j < 8
        assert cell_to_square(i, j, flipped) == square


@pytest.mark.parametrize("flipped", [False, True])
def test_cells_cover_every_square_once(flipped: bool) -> None:
    squares = {cell_to_square(i, j, flipped) for i in range(8) for j in range(8)}
    assert squares == set(SQUARES)


def test_unflipped_rows_and_files() -> None:
    # row 0 is rank 8; column j lands on file FILES[7 - j]
    assert cell_to_square(0, 0, False) == Square.from_algebraic("h8")
    assert cell_to_square(0, 7, False) == Square.from_algebraic("a8")
    assert cell_to_square(7, 7, False) == Square.from_algebraic("a1")


def test_flipped_rows_and_files() -> None:
    assert cell_to_square(0, 0, True) == Square.from_algebraic("a1")
    assert cell_to_square(0, 7, True) == Square.from_algebraic("h1")
    assert cell_to_square(7, 0, True) == Square.from_algebraic("a8")


def test_dark_parity() -> None:
    for i in range(8):
        for j in range(8):
            assert is_dark_cell(i, j) == ((i + j) % 2 == 0)


def test_a1_dark_h1_light_unflipped() -> None:
    assert is_dark_cell(*square_to_cell(Square.from_algebraic("a1"), False))
    assert not is_dark_cell(*square_to_cell(Square.from_algebraic("h1"), False))


def test_cell_rect_mirrors_column() -> None:
    assert cell_rect(0, 7, 400) == (0, 0, 50, 50)
    assert cell_rect(0, 0, 400) == (350, 0, 50, 50)
    assert cell_rect(7, 7, 400) == (0, 350, 50, 50)


def test_cell_rect_applies_padding() -> None:
    assert cell_rect(1, 6, 400, left=10, top=20) == (60, 70, 50, 50)


def test_a1_pixel_slot_per_orientation() -> None:
    a1 = Square.from_algebraic("a1")
    x, y, _, _ = cell_rect(*square_to_cell(a1, False), 400)
    assert (x, y) == (0, 350)
    x, y, _, _ = cell_rect(*square_to_cell(a1, True), 400)
    assert (x, y) == (350, 0)


def test_flip_keeps_dark_slots() -> None:
    def dark_rects(flipped: bool) -> set:
        cells = (square_to_cell(square, flipped) for square in SQUARES)
        return {cell_rect(i, j, 400) for i, j in cells if is_dark_cell(i, j)}

    assert dark_rects(False) == dark_rects(True)
    assert len(dark_rects(False)) == 32


@pytest.mark.parametrize("flipped", [False, True])
def test_square_center_is_center_of_cell_rect(flipped: bool) -> None:
    for square in SQUARES:
        x, y, w, h = cell_rect(*square_to_cell(square, flipped), 400, left=7, top=11)
        assert square_center(square, 400, flipped, left=7, top=11) == pytest.approx(
            (x + w / 2, y + h / 2)
        )


def test_square_center_values() -> None:
    assert square_center(Square.from_algebraic("a8"), 400, False) == (25, 25)
    assert square_center(Square.from_algebraic("a8"), 400, True) == (375, 375)
    assert square_center(Square.from_algebraic("h1"), 400, False) == (375, 375)


def test_canvas_size_independent_of_flip() -> None:
    assert canvas_size(400, (1, 2, 3, 4)) == (406, 404)
    assert RenderConfig(size=400, flipped=True).canvas_size == RenderConfig(size=400).canvas_size
