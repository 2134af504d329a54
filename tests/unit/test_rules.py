import chess
import pytest

from chess_image.piece import Piece
from chess_image.rules import Notation, PythonChessEngine
from chess_image.square import Square
from chess_image.types import Color, PieceKind


def test_load_valid_fen() -> None:
    engine = PythonChessEngine()
    assert engine.load_notation("4k3/8/8/8/8/8/8/4K2R w K - 0 1", Notation.FEN)
    assert engine.piece_at(Square.from_algebraic("h1")) == Piece(Color.WHITE, PieceKind.ROOK)
    assert engine.piece_at(Square.from_algebraic("e8")) == Piece(Color.BLACK, PieceKind.KING)
    assert engine.piece_at(Square.from_algebraic("a1")) is None


@pytest.mark.parametrize("fen", ["", "not a fen", "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP w KQkq - 0 1"])
def test_invalid_fen_keeps_board(fen: str) -> None:
    engine = PythonChessEngine()
    before = engine.board.fen()
    assert not engine.load_notation(fen, Notation.FEN)
    assert engine.board.fen() == before


def test_load_pgn_uses_final_position() -> None:
    engine = PythonChessEngine()
    assert engine.load_notation("1. e4 e5 2. Nf3 Nc6 *", Notation.PGN)
    assert engine.piece_at(Square.from_algebraic("f3")) == Piece(Color.WHITE, PieceKind.KNIGHT)
    assert engine.piece_at(Square.from_algebraic("c6")) == Piece(Color.BLACK, PieceKind.KNIGHT)
    assert engine.piece_at(Square.from_algebraic("e2")) is None


def test_pgn_with_illegal_move_is_rejected() -> None:
    engine = PythonChessEngine()
    before = engine.board.fen()
    assert not engine.load_notation("1. e4 e5 2. Ke3 *", Notation.PGN)
    assert engine.board.fen() == before


def test_empty_pgn_is_rejected() -> None:
    assert not PythonChessEngine().load_notation("", Notation.PGN)


def test_clear_and_set_piece() -> None:
    engine = PythonChessEngine()
    engine.clear()
    assert engine.board.piece_map() == {}
    engine.set_piece(Square.from_algebraic("c3"), Piece(Color.BLACK, PieceKind.QUEEN))
    assert engine.board.piece_at(chess.C3) == chess.Piece(chess.QUEEN, chess.BLACK)
