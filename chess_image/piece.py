"""Piece value type (colour + kind)."""

from __future__ import annotations

from dataclasses import dataclass

from chess_image.types import Color, PieceKind

PIECE_LETTERS = frozenset(kind.value for kind in PieceKind)


@dataclass(frozen=True)
class Piece:
    """An occupant of a square. Empty squares have no ``Piece`` at all."""

    color: Color
    kind: PieceKind

    @classmethod
    def from_symbol(cls, symbol: str) -> Piece:
        """Uppercase letters are white, lowercase black (``'K'``, ``'q'``...)."""
        if len(symbol) != 1 or symbol.lower() not in PIECE_LETTERS:
            raise ValueError(f"Not a piece symbol: {symbol!r}")
        color = Color.WHITE if symbol.isupper() else Color.BLACK
        return cls(color, PieceKind(symbol.lower()))

    def symbol(self) -> str:
        letter = self.kind.value
        return letter.upper() if self.color == Color.WHITE else letter


def is_piece_symbol(symbol: str) -> bool:
    return len(symbol) == 1 and symbol.lower() in PIECE_LETTERS
