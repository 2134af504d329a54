"""Rules engine collaborator.

The renderer only needs four operations from a chess library: load a
notation string, read a square, clear the board and put a piece. Parsing and
legality stay in the engine; ``PythonChessEngine`` adapts ``python-chess``.
"""

import io
from enum import StrEnum, auto
from typing import Optional, Protocol

import chess
import chess.pgn

from chess_image.piece import Piece
from chess_image.square import Square
from chess_image.types import Color, PieceKind


class Notation(StrEnum):
    FEN = auto()
    PGN = auto()


class RulesEngine(Protocol):
    def load_notation(self, text: str, notation: Notation) -> bool: ...

    def piece_at(self, square: Square) -> Optional[Piece]: ...

    def clear(self) -> None: ...

    def set_piece(self, square: Square, piece: Piece) -> None: ...


def to_chess_square(square: Square) -> chess.Square:
    return chess.square(square.file, square.rank)


def to_chess_piece(piece: Piece) -> chess.Piece:
    return chess.Piece.from_symbol(piece.symbol())


def from_chess_piece(piece: chess.Piece) -> Piece:
    color = Color.WHITE if piece.color == chess.WHITE else Color.BLACK
    return Piece(color, PieceKind(chess.piece_symbol(piece.piece_type)))


class PythonChessEngine:
    """``RulesEngine`` backed by a ``chess.Board``.

    A failed load leaves the current board untouched.
    """

    board: chess.Board

    def __init__(self, board: Optional[chess.Board] = None):
        self.board = board if board is not None else chess.Board()

    def load_notation(self, text: str, notation: Notation) -> bool:
        if notation == Notation.FEN:
            return self._load_fen(text)
        return self._load_pgn(text)

    def _load_fen(self, fen: str) -> bool:
        try:
            board = chess.Board(fen.strip())
        except ValueError:
            return False
        self.board = board
        return True

    def _load_pgn(self, pgn: str) -> bool:
        game = chess.pgn.read_game(io.StringIO(pgn))
        if game is None or game.errors:
            return False
        self.board = game.end().board()
        return True

    def piece_at(self, square: Square) -> Optional[Piece]:
        piece = self.board.piece_at(to_chess_square(square))
        return from_chess_piece(piece) if piece is not None else None

    def clear(self) -> None:
        self.board.clear()

    def set_piece(self, square: Square, piece: Piece) -> None:
        self.board.set_piece_at(to_chess_square(square), to_chess_piece(piece))
