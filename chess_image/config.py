"""Render configuration.

``RenderConfig`` is immutable; derive variants with ``dataclasses.replace``.
Colours are any string Pillow's ``ImageColor`` understands (CSS names,
``#rgb``, ``#rrggbb``, ``#rrggbbaa``, ``rgb(...)``).
"""

from dataclasses import dataclass
from typing import Tuple

from PIL import ImageColor

from chess_image.square import BOARD_DIMENSION
from chess_image.types import Padding
from chess_image.utils.coords import canvas_size


DEFAULT_SIZE = 480
DEFAULT_PADDING: Padding = (0, 0, 0, 0)
DEFAULT_LIGHT = "#f0d9b5"
DEFAULT_DARK = "#b58863"
DEFAULT_HIGHLIGHT = "#eb6150cc"
DEFAULT_STYLE = "merida"


@dataclass(frozen=True)
class RenderConfig:
    """Options for a single render.

    Attributes:
        size: Edge length in pixels of the 8x8 board area (padding excluded),
            at least 8.
        padding: Extra pixels outside the board as (top, right, bottom, left).
        light: Light square colour, also used for the padding background.
        dark: Dark square colour.
        highlight: Overlay colour for highlighted squares.
        style: Sprite set used for pieces.
        flipped: If True rank 1 is drawn at the top and file a at the right.
    """

    size: int = DEFAULT_SIZE
    padding: Padding = DEFAULT_PADDING
    light: str = DEFAULT_LIGHT
    dark: str = DEFAULT_DARK
    highlight: str = DEFAULT_HIGHLIGHT
    style: str = DEFAULT_STYLE
    flipped: bool = False

    def __post_init__(self) -> None:
        # every square needs at least one pixel
        if self.size < BOARD_DIMENSION:
            raise ValueError(
                f"Board size must be at least {BOARD_DIMENSION}, got {self.size}"
            )
        padding = tuple(self.padding)
        if len(padding) != 4:
            raise ValueError(
                f"Padding needs 4 values (top, right, bottom, left), got {padding}"
            )
        if any(p < 0 for p in padding):
            raise ValueError(f"Padding must be non-negative, got {padding}")
        # accept lists from callers while keeping the instance hashable
        object.__setattr__(self, "padding", padding)
        for name in ("light", "dark", "highlight"):
            try:
                ImageColor.getrgb(getattr(self, name))
            except ValueError as err:
                raise ValueError(f"Invalid {name} colour: {err}") from err

    @property
    def square_size(self) -> float:
        return self.size / 8

    @property
    def canvas_size(self) -> Tuple[int, int]:
        """Total (width, height) of the image including padding."""
        return canvas_size(self.size, self.padding)
