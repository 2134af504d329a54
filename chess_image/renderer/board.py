from typing import Iterable, Optional, Tuple
import asyncio
import logging

from PIL import Image, ImageColor
from pyrsistent import pset, pvector
from pyrsistent.typing import PSet, PVector

from chess_image.annotations import Arrow
from chess_image.config import RenderConfig
from chess_image.errors import NotReadyError
from chess_image.position import PositionModel
from chess_image.renderer.sprites import SpriteLoader, SpriteLookupFn
from chess_image.square import Square
from chess_image.types import Rect
from chess_image.utils.arrow import draw_arrow
from chess_image.utils.coords import (
    cell_rect,
    cell_to_square,
    is_dark_cell,
    square_center,
)


ARROW_THICKNESS_RATIO = 0.1  # of a square's edge

logger = logging.getLogger(__name__)


def _box(rect: Rect) -> Tuple[int, int, int, int]:
    """Inclusive integer pixel box (x0, y0, x1, y1) covering ``rect``."""
    x, y, w, h = rect
    x0, y0 = round(x), round(y)
    return x0, y0, round(x + w) - 1, round(y + h) - 1


def _fill_cell(image: Image.Image, rect: Rect, color: str) -> None:
    x0, y0, x1, y1 = _box(rect)
    layer = Image.new("RGBA", (x1 - x0 + 1, y1 - y0 + 1), ImageColor.getcolor(color, "RGBA"))
    image.alpha_composite(layer, (x0, y0))


async def _draw_piece(
    image: Image.Image,
    rect: Rect,
    sprite_lookup: SpriteLookupFn,
    style: str,
    position: PositionModel,
    square: Square,
) -> None:
    piece = position.piece_at(square)
    if piece is None:
        return
    x0, y0, x1, y1 = _box(rect)
    width, height = x1 - x0 + 1, y1 - y0 + 1
    sprite = await asyncio.to_thread(sprite_lookup, style, piece, width)
    if sprite.size != (width, height):
        sprite = sprite.resize((width, height))
    image.alpha_composite(sprite.convert("RGBA"), (x0, y0))


async def render(
    position: PositionModel,
    highlights: Iterable[Square] = (),
    arrows: Iterable[Arrow] = (),
    config: Optional[RenderConfig] = None,
    sprite_lookup: Optional[SpriteLookupFn] = None,
) -> Image.Image:
    """
    Render a position as a PIL image.

    Layers, each drawn over the previous: light background (board and
    padding), dark squares, highlights, piece sprites, then arrows in list
    order.

    Raises:
        NotReadyError: ``position`` has not been loaded.
    """
    if not position.ready:
        raise NotReadyError()

    if config is None:
        config = RenderConfig()
    if sprite_lookup is None:
        sprite_lookup = SpriteLoader()
    highlighted: PSet[Square] = pset(highlights)
    arrow_list: PVector[Arrow] = pvector(arrows)

    top, _, _, left = config.padding
    img = Image.new("RGBA", config.canvas_size, ImageColor.getcolor(config.light, "RGBA"))

    for i in range(8):
        for j in range(8):
            square = cell_to_square(i, j, config.flipped)
            rect = cell_rect(i, j, config.size, left=left, top=top)

            if is_dark_cell(i, j):
                _fill_cell(img, rect, config.dark)

            if square in highlighted:
                _fill_cell(img, rect, config.highlight)

            await _draw_piece(img, rect, sprite_lookup, config.style, position, square)

    thickness = config.square_size * ARROW_THICKNESS_RATIO
    for arrow in arrow_list:
        start = square_center(arrow.from_square, config.size, config.flipped, left, top)
        end = square_center(arrow.to_square, config.size, config.flipped, left, top)
        draw_arrow(img, start, end, thickness, arrow.color)

    logger.debug(
        "Rendered %d pieces, %d highlights, %d arrows at %s",
        position.occupied(),
        len(highlighted),
        len(arrow_list),
        config.canvas_size,
    )
    return img


class BoardRenderer:
    config: RenderConfig
    sprite_lookup: SpriteLookupFn

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        sprite_lookup: Optional[SpriteLookupFn] = None,
    ):
        self.config = config or RenderConfig()
        self.sprite_lookup = sprite_lookup or SpriteLoader()

    async def render(
        self,
        position: PositionModel,
        highlights: Iterable[Square] = (),
        arrows: Iterable[Arrow] = (),
    ) -> Image.Image:
        return await render(
            position,
            highlights=highlights,
            arrows=arrows,
            config=self.config,
            sprite_lookup=self.sprite_lookup,
        )
