"""Board annotations: arrows between squares and highlighted squares.

Callers may pass squares by algebraic name; these helpers normalise input
into the immutable collections the renderer consumes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence, Union

from pyrsistent import pset, pvector
from pyrsistent.typing import PSet, PVector

from chess_image.square import Square, as_square

DEFAULT_ARROW_COLOR = "#15781bcc"


@dataclass(frozen=True)
class Arrow:
    """Arrow from the centre of one square to the centre of another.

    Attributes:
        from_square: Tail square.
        to_square: Square the head points at.
        color: Any Pillow colour string.
    """

    from_square: Square
    to_square: Square
    color: str = DEFAULT_ARROW_COLOR

    @classmethod
    def from_algebraic(
        cls, from_square: str, to_square: str, color: str = DEFAULT_ARROW_COLOR
    ) -> Arrow:
        return cls(Square.from_algebraic(from_square), Square.from_algebraic(to_square), color)


ArrowLike = Union[Arrow, Sequence[Any], Mapping[str, Any]]


def as_arrow(value: ArrowLike) -> Arrow:
    """Coerce an ``Arrow``, a ``(from, to[, color])`` sequence or a
    ``{"from": ..., "to": ..., "color": ...}`` mapping."""
    if isinstance(value, Arrow):
        return value
    if isinstance(value, Mapping):
        return Arrow(
            as_square(value["from"]),
            as_square(value["to"]),
            value.get("color", DEFAULT_ARROW_COLOR),
        )
    if isinstance(value, str) or len(value) not in (2, 3):
        raise ValueError(f"Cannot build an arrow from {value!r}")
    color = value[2] if len(value) == 3 else DEFAULT_ARROW_COLOR
    return Arrow(as_square(value[0]), as_square(value[1]), color)


def arrow_list(values: Iterable[ArrowLike]) -> PVector[Arrow]:
    return pvector(as_arrow(value) for value in values)


def highlight_set(values: Iterable[Union[Square, str]]) -> PSet[Square]:
    return pset(as_square(value) for value in values)
