"""Immutable position snapshot.

``PositionModel`` maps squares to pieces with a persistent map; a square is
empty iff it is absent. The ``status`` field is the render-readiness state
machine: ``EMPTY`` at construction, ``LOADED`` after any successful load.
Loads build a new model and never merge with the previous one, so a failed
load cannot disturb the model a caller already holds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from chess_image.errors import ParseError
from chess_image.piece import Piece, is_piece_symbol
from chess_image.rules import Notation, RulesEngine
from chess_image.square import BOARD_DIMENSION, SQUARES, Square
from chess_image.types import Grid, PositionStatus


@dataclass(frozen=True)
class PositionModel:
    """Occupants of the 64 squares.

    Attributes:
        pieces: Occupied squares only.
        status: ``LOADED`` once a position has been loaded.
    """

    pieces: PMap[Square, Piece]
    status: PositionStatus = PositionStatus.EMPTY

    @classmethod
    def empty(cls) -> PositionModel:
        return cls(pieces=pmap())

    @property
    def ready(self) -> bool:
        return self.status == PositionStatus.LOADED

    def piece_at(self, square: Square) -> Optional[Piece]:
        return self.pieces.get(square)

    def occupied(self) -> int:
        return len(self.pieces)


def from_engine(engine: RulesEngine) -> PositionModel:
    """Snapshot the engine's board into a loaded model."""
    pieces = {}
    for square in SQUARES:
        piece = engine.piece_at(square)
        if piece is not None:
            pieces[square] = piece
    return PositionModel(pieces=pmap(pieces), status=PositionStatus.LOADED)


def from_notation(text: str, notation: Notation, engine: RulesEngine) -> PositionModel:
    """Load FEN or PGN through the rules engine.

    Raises:
        ParseError: The engine rejected ``text``.
    """
    if not engine.load_notation(text, notation):
        raise ParseError(f"{notation.name} could not be read successfully")
    return from_engine(engine)


def from_grid(grid: Grid, engine: Optional[RulesEngine] = None) -> PositionModel:
    """Build a model from rows of single-character codes, rank 8 first.

    ``""`` is an empty square, uppercase letters are white and lowercase
    black. Cells that are not piece letters, and cells beyond the 8x8 board,
    are skipped. When ``engine`` is given it is cleared and then mirrors the
    new position.
    """
    pieces = {}
    for i, row in enumerate(grid[:BOARD_DIMENSION]):
        for j, code in enumerate(row[:BOARD_DIMENSION]):
            if code == "" or not is_piece_symbol(code):
                continue
            pieces[Square(j, BOARD_DIMENSION - 1 - i)] = Piece.from_symbol(code)

    if engine is not None:
        engine.clear()
        for square, piece in pieces.items():
            engine.set_piece(square, piece)
    return PositionModel(pieces=pmap(pieces), status=PositionStatus.LOADED)
