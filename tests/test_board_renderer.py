import chess

from app.models import CastlingRights, Position, Side
from app.utils.board_renderer import (
    EMPTY_GLYPH,
    PIECE_GLYPHS,
    glyph_for,
    render_board_lines,
    render_position,
)
from app.utils.fen_parser import parse_fen

EXPECTED_START = """Fen {
  rows: 8,
  columns: 8,
  board: [
  a b c d e f g h
8 ♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜ 8
7 ♟ ♟ ♟ ♟ ♟ ♟ ♟ ♟ 7
6 . . . . . . . . 6
5 . . . . . . . . 5
4 . . . . . . . . 4
3 . . . . . . . . 3
2 ♙ ♙ ♙ ♙ ♙ ♙ ♙ ♙ 2
1 ♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖ 1
  a b c d e f g h
  ],
  toMove: 'white',
  castlingRights: {
    white: { queenside: true, kingside: true },
    black: { queenside: true, kingside: true }
  },
  enPassantSquare: '-',
  halfMoves: 0,
  fullMoves: 1
}"""


def test_starting_position_render(start_fen):
    assert render_position(parse_fen(start_fen)) == EXPECTED_START


def test_render_is_pure(after_e4_fen):
    position = parse_fen(after_e4_fen)
    assert render_position(position) == render_position(position)


def test_glyph_table_covers_every_piece():
    assert len(PIECE_GLYPHS) == 12
    assert set(PIECE_GLYPHS) == set("pnbrqkPNBRQK")
    assert glyph_for(chess.Piece.from_symbol("K")) == "♔"
    assert glyph_for(chess.Piece.from_symbol("p")) == "♟"
    assert glyph_for(None) == EMPTY_GLYPH


def test_board_lines_follow_fen_order(after_e4_fen):
    lines = render_board_lines(parse_fen(after_e4_fen))

    assert lines[0] == lines[-1] == "  a b c d e f g h"
    assert lines[1].startswith("8 ") and lines[1].endswith(" 8")
    assert lines[5] == "4 . . . . ♙ . . . 4"
    assert lines[7] == "2 ♙ ♙ ♙ ♙ . ♙ ♙ ♙ 2"
    assert lines[8].startswith("1 ")


def test_metadata_block():
    position = Position(
        board=tuple(tuple(None for _ in range(8)) for _ in range(8)),
        side_to_move=Side.BLACK,
        castling_rights=CastlingRights(white_kingside=True, black_queenside=True),
        en_passant_square="d6",
        halfmove_clock=7,
        fullmove_number=42,
    )
    text = render_position(position)

    assert "  toMove: 'black'," in text
    assert "    white: { queenside: false, kingside: true }," in text
    assert "    black: { queenside: true, kingside: false }" in text
    assert "  enPassantSquare: 'd6'," in text
    assert "  halfMoves: 7," in text
    assert text.endswith("  fullMoves: 42\n}")
