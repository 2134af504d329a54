"""Arrow geometry for move annotations.

An arrow is a straight shaft plus an isosceles triangular head whose tip sits
on the end point. With unit direction ``u`` and perpendicular ``p``::

    head_base = end - head_length * u
    shaft     = start +/- p * thickness/2, head_base +/- p * thickness/2
    head      = end, head_base +/- p * head_width/2

The shaft stops at the head base so the translucent shapes do not overlap.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageColor, ImageDraw

from chess_image.types import Point

FloatArray = npt.NDArray[np.float64]

HEAD_LENGTH_RATIO = 3.0
HEAD_WIDTH_RATIO = 3.0


@dataclass(frozen=True)
class ArrowShape:
    """Polygons making up one arrow.

    Attributes:
        shaft: Quad from the start point to the head base, ``None`` when the
            arrow is shorter than its head.
        head: Triangle (tip, base corner, base corner).
    """

    shaft: Optional[Tuple[Point, Point, Point, Point]]
    head: Tuple[Point, Point, Point]


def _point(v: FloatArray) -> Point:
    return float(v[0]), float(v[1])


def arrow_shape(start: Point, end: Point, thickness: float) -> Optional[ArrowShape]:
    """Compute the arrow polygons, or ``None`` when ``start == end``."""
    a: FloatArray = np.asarray(start, dtype=np.float64)
    b: FloatArray = np.asarray(end, dtype=np.float64)
    d: FloatArray = b - a
    length = float(np.hypot(d[0], d[1]))
    if length == 0.0:
        return None

    u: FloatArray = d / length
    p: FloatArray = np.array([-u[1], u[0]])

    head_length = min(HEAD_LENGTH_RATIO * thickness, length)
    half_head = HEAD_WIDTH_RATIO * thickness / 2
    half_shaft = thickness / 2

    base: FloatArray = b - u * head_length
    shaft: Optional[Tuple[Point, Point, Point, Point]] = None
    if head_length < length:
        shaft = (
            _point(a + p * half_shaft),
            _point(base + p * half_shaft),
            _point(base - p * half_shaft),
            _point(a - p * half_shaft),
        )
    head = (
        _point(b),
        _point(base + p * half_head),
        _point(base - p * half_head),
    )
    return ArrowShape(shaft=shaft, head=head)


def draw_arrow(
    image: Image.Image, start: Point, end: Point, thickness: float, color: str
) -> Image.Image:
    """Composite the arrow over an RGBA ``image`` in place. Degenerate arrows draw nothing."""
    shape = arrow_shape(start, end, thickness)
    if shape is None:
        return image

    fill = ImageColor.getcolor(color, "RGBA")
    overlay = Image.new("RGBA", image.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(overlay)
    if shape.shaft is not None:
        draw.polygon(list(shape.shaft), fill=fill)
    draw.polygon(list(shape.head), fill=fill)
    image.alpha_composite(overlay)
    return image
