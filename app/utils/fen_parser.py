# app/utils/fen_parser.py
import re
from typing import List, Tuple

import chess

from app.models import CastlingRights, Position, Rank, Side, Square
from app.utils.fen_errors import (
    InvalidCastlingTokenError,
    InvalidColorTokenError,
    InvalidEnPassantTokenError,
    InvalidMoveCounterError,
    InvalidRankWidthError,
    InvalidSquareTokenError,
    MalformedFenError,
)

EMPTY_RUN_DIGITS = "12345678"
PIECE_LETTERS = "pnbrqkPNBRQK"

COUNTER_RE = re.compile(r"[0-9]+")
EN_PASSANT_RE = re.compile(r"[a-h][36]|-")
CASTLING_RE = re.compile(r"K?Q?k?q?")


def parse_fen(fen: str, strict: bool = False) -> Position:
    """
    Decode a 6-field FEN string into a Position.

    Lenient mode (the default) accepts anything other than "w" as black,
    ignores unknown castling letters and keeps the en passant token as-is.
    Strict mode rejects those too. Move counters are always checked.

    Raises a FenError subclass on the first rule that fails.
    """
    fields = fen.strip().split(" ")
    if len(fields) != 6:
        raise MalformedFenError("FEN must have exactly 6 fields")

    placement, color, castling, en_passant, halfmoves, fullmoves = fields

    board = parse_board(placement, strict=strict)
    side = parse_side_to_move(color, strict=strict)
    rights = parse_castling_rights(castling, strict=strict)
    if strict and not EN_PASSANT_RE.fullmatch(en_passant):
        raise InvalidEnPassantTokenError(en_passant)

    halfmove_clock = _parse_counter("Halfmove clock", halfmoves)
    fullmove_number = _parse_counter("Fullmove number", fullmoves)
    if strict and fullmove_number < 1:
        raise InvalidMoveCounterError(
            "Fullmove number",
            fullmoves,
            f"Fullmove number must start at 1, got '{fullmoves}'",
        )

    return Position(
        board=board,
        side_to_move=side,
        castling_rights=rights,
        en_passant_square=en_passant,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
    )


def parse_board(placement: str, strict: bool = False) -> Tuple[Rank, ...]:
    rows = placement.split("/")
    if len(rows) != 8:
        raise MalformedFenError("Board must have exactly 8 rows")

    return tuple(
        _parse_rank(row, rank_number=8 - idx, strict=strict)
        for idx, row in enumerate(rows)
    )


def _parse_rank(row: str, rank_number: int, strict: bool) -> Rank:
    squares: List[Square] = []
    previous_was_digit = False

    for char in row:
        if char in EMPTY_RUN_DIGITS:
            if strict and previous_was_digit:
                raise InvalidSquareTokenError(
                    char,
                    f"Consecutive empty-square digits in board: {char}",
                )
            squares.extend([None] * int(char))
            previous_was_digit = True
        elif char in PIECE_LETTERS:
            squares.append(chess.Piece.from_symbol(char))
            previous_was_digit = False
        else:
            raise InvalidSquareTokenError(char)

    if len(squares) != 8:
        raise InvalidRankWidthError(rank_number, len(squares))
    return tuple(squares)


def parse_side_to_move(token: str, strict: bool = False) -> Side:
    if token == "w":
        return Side.WHITE
    if strict and token != "b":
        raise InvalidColorTokenError(token)
    return Side.BLACK


def parse_castling_rights(token: str, strict: bool = False) -> CastlingRights:
    if token == "-":
        return CastlingRights()
    if strict and (not token or not CASTLING_RE.fullmatch(token)):
        raise InvalidCastlingTokenError(token)

    return CastlingRights(
        white_kingside="K" in token,
        white_queenside="Q" in token,
        black_kingside="k" in token,
        black_queenside="q" in token,
    )


def _parse_counter(field: str, token: str) -> int:
    if not COUNTER_RE.fullmatch(token):
        raise InvalidMoveCounterError(field, token)
    return int(token)
