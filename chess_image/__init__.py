"""Chess position to PNG renderer.

Turns a position (loaded from FEN, PGN or a raw 8x8 grid) plus optional
highlighted squares and arrows into a Pillow image:

* :mod:`chess_image.utils.coords` maps squares to grid cells and pixels,
  honouring the board flip.
* :mod:`chess_image.utils.arrow` builds arrow polygons.
* :mod:`chess_image.renderer.board` composites background, squares,
  highlights, sprites and arrows.
* :mod:`chess_image.generator` is the stateful session most callers use.
"""

from chess_image.annotations import Arrow
from chess_image.config import RenderConfig
from chess_image.errors import (
    AssetMissingError,
    ChessImageError,
    ExportError,
    NotReadyError,
    ParseError,
)
from chess_image.generator import ChessImageGenerator
from chess_image.piece import Piece
from chess_image.position import PositionModel
from chess_image.renderer.board import BoardRenderer, render
from chess_image.square import Square
from chess_image.types import Color, PieceKind

__all__ = [
    "Arrow",
    "AssetMissingError",
    "BoardRenderer",
    "ChessImageError",
    "ChessImageGenerator",
    "Color",
    "ExportError",
    "NotReadyError",
    "ParseError",
    "Piece",
    "PieceKind",
    "PositionModel",
    "RenderConfig",
    "Square",
    "render",
]
