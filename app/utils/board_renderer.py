# app/utils/board_renderer.py
from types import MappingProxyType
from typing import List

import chess

from app.models import CastlingRights, Position, Square

# fixed symbol -> glyph table, e.g. "K" -> "♔", "p" -> "♟"
PIECE_GLYPHS = MappingProxyType(dict(chess.UNICODE_PIECE_SYMBOLS))
EMPTY_GLYPH = "."
FILE_HEADER = "  " + " ".join(chess.FILE_NAMES)


def glyph_for(square: Square) -> str:
    if square is None:
        return EMPTY_GLYPH
    return PIECE_GLYPHS.get(square.symbol(), EMPTY_GLYPH)


def _js_bool(value: bool) -> str:
    return "true" if value else "false"


def render_board_lines(position: Position) -> List[str]:
    """Labelled 8x8 grid, rank 8 at the top and file a on the left."""
    lines = [FILE_HEADER]
    for row, rank in enumerate(position.board):
        rank_number = 8 - row
        cells = "".join(f"{glyph_for(square)} " for square in rank)
        lines.append(f"{rank_number} {cells}{rank_number}")
    lines.append(FILE_HEADER)
    return lines


def _render_castling(rights: CastlingRights) -> List[str]:
    return [
        "  castlingRights: {",
        f"    white: {{ queenside: {_js_bool(rights.white_queenside)}, "
        f"kingside: {_js_bool(rights.white_kingside)} }},",
        f"    black: {{ queenside: {_js_bool(rights.black_queenside)}, "
        f"kingside: {_js_bool(rights.black_kingside)} }}",
        "  },",
    ]


def render_position(position: Position) -> str:
    """
    Render a Position as a board diagram followed by its metadata.

    Output is a pure function of the Position; it never fails.
    """
    lines = ["Fen {", "  rows: 8,", "  columns: 8,", "  board: ["]
    lines.extend(render_board_lines(position))
    lines.append("  ],")
    lines.append(f"  toMove: '{position.side_to_move.value}',")
    lines.extend(_render_castling(position.castling_rights))
    lines.append(f"  enPassantSquare: '{position.en_passant_square}',")
    lines.append(f"  halfMoves: {position.halfmove_clock},")
    lines.append(f"  fullMoves: {position.fullmove_number}")
    lines.append("}")
    return "\n".join(lines)
